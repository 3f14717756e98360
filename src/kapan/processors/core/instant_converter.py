"""Civil date/time to absolute instant conversion.

Resolved reminders carry a wall-clock date and time that belong to a fixed
civil timezone (Asia/Jakarta by default). These helpers attach that zone,
never the host machine's, and convert to UTC.
"""

import re
from datetime import date, datetime, time, tzinfo
from typing import Tuple

from dateutil import tz as dateutil_tz

from ...core.config_manager import DEFAULT_TIMEZONE
from ...core.error_handler import InvalidDateTimeError, UnknownTimezoneError
from . import messages

_ISO_DATE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")
_ISO_TIME = re.compile(r"(\d{2}):(\d{2})")
_LOCAL_DATETIME = re.compile(r"(\d{4}-\d{2}-\d{2})T(\d{2}:\d{2})(?::\d{2}(?:\.\d+)?)?")

_MONTH_ABBREVIATIONS = {
    "en": ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
    "id": ["Jan", "Feb", "Mar", "Apr", "Mei", "Jun",
           "Jul", "Agu", "Sep", "Okt", "Nov", "Des"],
}

_DISPLAY_JOINERS = {
    "en": "at",
    "id": "pukul",
}


def get_zone(zone: str) -> tzinfo:
    """Look up a timezone by IANA identifier.

    Raises:
        UnknownTimezoneError: If dateutil cannot resolve the identifier
    """
    resolved = dateutil_tz.gettz(zone) if zone else None
    if resolved is None:
        raise UnknownTimezoneError(zone)
    return resolved


def parse_iso_date(iso_date: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` string."""
    match = _ISO_DATE.fullmatch(iso_date) if isinstance(iso_date, str) else None
    if not match:
        raise InvalidDateTimeError("date", iso_date, "expected YYYY-MM-DD")

    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidDateTimeError("date", iso_date, str(e)) from e


def parse_iso_time(iso_time: str) -> time:
    """Parse a strict 24-hour ``HH:mm`` string."""
    match = _ISO_TIME.fullmatch(iso_time) if isinstance(iso_time, str) else None
    if not match:
        raise InvalidDateTimeError("time", iso_time, "expected HH:mm")

    hour, minute = (int(part) for part in match.groups())
    if hour > 23:
        raise InvalidDateTimeError("time", iso_time, "hour must be in 00..23")
    if minute > 59:
        raise InvalidDateTimeError("time", iso_time, "minute must be in 00..59")
    return time(hour, minute)


def to_zoned_datetime(iso_date: str, iso_time: str, zone: str = DEFAULT_TIMEZONE) -> datetime:
    """Attach ``zone`` to the given civil date and time."""
    civil = datetime.combine(parse_iso_date(iso_date), parse_iso_time(iso_time))
    return civil.replace(tzinfo=get_zone(zone))


def to_absolute_instant(iso_date: str, iso_time: str, zone: str = DEFAULT_TIMEZONE) -> datetime:
    """Convert a civil date and time in ``zone`` to a UTC instant.

    Example: ``to_absolute_instant("2025-10-20", "18:00")`` is 11:00 UTC,
    since Asia/Jakarta is UTC+7.

    Args:
        iso_date: Civil date, ``YYYY-MM-DD``
        iso_time: Wall-clock time, ``HH:mm``
        zone: IANA timezone the wall clock belongs to

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        InvalidDateTimeError: If either string is malformed or out of range
        UnknownTimezoneError: If the zone cannot be resolved
    """
    return to_zoned_datetime(iso_date, iso_time, zone).astimezone(dateutil_tz.UTC)


def split_local_datetime(value: str) -> Tuple[str, str]:
    """Split ``YYYY-MM-DDTHH:mm[:ss]`` into its date and time parts.

    Seconds, if present, are dropped.
    """
    match = _LOCAL_DATETIME.fullmatch(value) if isinstance(value, str) else None
    if not match:
        raise InvalidDateTimeError("datetime", value, "expected YYYY-MM-DDTHH:mm")
    return match.group(1), match.group(2)


def local_datetime_to_instant(value: str, zone: str = DEFAULT_TIMEZONE) -> datetime:
    """Convert a combined local datetime string in ``zone`` to a UTC instant."""
    iso_date, iso_time = split_local_datetime(value)
    return to_absolute_instant(iso_date, iso_time, zone)


def format_for_display(iso_date: str, iso_time: str, zone: str = DEFAULT_TIMEZONE,
                       locale: str = "en") -> str:
    """Render a civil date and time for people, e.g. "20 Oct 2025 at 18:00".

    The instant is built and rendered in the same zone, so the output never
    depends on the host machine's timezone.
    """
    key = messages.resolve_locale(locale)
    zone_info = get_zone(zone)
    rendered = to_absolute_instant(iso_date, iso_time, zone).astimezone(zone_info)
    month = _MONTH_ABBREVIATIONS[key][rendered.month - 1]

    return (
        f"{rendered.day} {month} {rendered.year} "
        f"{_DISPLAY_JOINERS[key]} {rendered.hour:02d}:{rendered.minute:02d}"
    )
