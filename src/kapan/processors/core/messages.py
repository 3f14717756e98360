"""User-facing wording for each supported locale."""

from typing import Dict, Optional

from .vocabulary import MERIDIEM_CHOICES, DateDescriptor

DEFAULT_LOCALE = "id"

_CATALOG: Dict[str, Dict[str, str]] = {
    "id": {
        "placeholder": "Pengingat",
        "unspecified_date": "nanti",
        "ask_date_and_time": (
            'Baik, saya catat "{activity}". Kapan kamu mau diingatkan? '
            "Bisa kasih tau tanggal dan jamnya? "
            'Contoh: "besok jam 6 sore" atau "hari ini jam 3 siang".'
        ),
        "ask_meridiem": (
            'Oke, "{activity}" {date} jam {time}. '
            "Tapi jam {time} pagi atau malam? Bisa tambahkan {choices}?"
        ),
        "choice_separator": ", ",
        "choice_last": ", atau ",
    },
    "en": {
        "placeholder": "Reminder",
        "unspecified_date": "later",
        "ask_date_and_time": (
            'Got it, I noted "{activity}". When should I remind you? '
            "Could you tell me the date and time? "
            'For example: "tomorrow jam 6 sore" or "today jam 3 siang".'
        ),
        "ask_meridiem": (
            'Okay, "{activity}" {date} at {time}. '
            "But is {time} in the morning or the evening? Could you add {choices}?"
        ),
        "choice_separator": ", ",
        "choice_last": ", or ",
    },
}

# How a relative-day keyword is echoed back in each locale
_DATE_WORDS: Dict[str, Dict[DateDescriptor, str]] = {
    "id": {
        DateDescriptor.TODAY: "hari ini",
        DateDescriptor.TOMORROW: "besok",
        DateDescriptor.DAY_AFTER_TOMORROW: "lusa",
    },
    "en": {
        DateDescriptor.TODAY: "today",
        DateDescriptor.TOMORROW: "tomorrow",
        DateDescriptor.DAY_AFTER_TOMORROW: "the day after tomorrow",
    },
}


def resolve_locale(locale: Optional[str]) -> str:
    """Map an arbitrary locale tag onto a supported catalog key."""
    if not locale:
        return DEFAULT_LOCALE
    language = locale.replace("_", "-").split("-")[0].lower()
    return language if language in _CATALOG else DEFAULT_LOCALE


def placeholder_label(locale: Optional[str] = None) -> str:
    return _CATALOG[resolve_locale(locale)]["placeholder"]


def ask_date_and_time(activity: str, locale: Optional[str] = None) -> str:
    """Prompt used when neither a usable date nor time was given."""
    return _CATALOG[resolve_locale(locale)]["ask_date_and_time"].format(activity=activity)


def ask_meridiem(
    activity: str,
    time_text: str,
    date_descriptor: Optional[DateDescriptor] = None,
    locale: Optional[str] = None
) -> str:
    """Prompt used when a bare 1-11 hour could be morning or evening.

    Args:
        activity: Recovered activity text
        time_text: The literal time as the user wrote it ("6", "8:30")
        date_descriptor: Relative day that was understood, if any
        locale: Catalog to use

    Returns:
        Question echoing what was understood so far
    """
    key = resolve_locale(locale)
    catalog = _CATALOG[key]

    if date_descriptor is None:
        date_word = catalog["unspecified_date"]
    else:
        date_word = _DATE_WORDS[key][date_descriptor]

    quoted = [f'"{choice}"' for choice in MERIDIEM_CHOICES]
    choices = catalog["choice_separator"].join(quoted[:-1]) + catalog["choice_last"] + quoted[-1]

    return catalog["ask_meridiem"].format(
        activity=activity,
        date=date_word,
        time=time_text,
        choices=choices
    )
