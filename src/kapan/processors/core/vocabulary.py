"""Keyword tables for Indonesian/English temporal expressions.

Everything the extractor recognises or strips lives here as data. Scan order
of each table is significant: the first matching entry wins.
"""

from enum import Enum
from typing import Dict, List, Tuple


class DateDescriptor(Enum):
    """Relative-day keywords."""
    TODAY = "hari ini"
    TOMORROW = "besok"
    DAY_AFTER_TOMORROW = "lusa"

    @property
    def offset_days(self) -> int:
        return DATE_OFFSETS[self]


class TimeOfDay(Enum):
    """Vague time-of-day keywords."""
    MORNING = "pagi"
    MIDDAY = "siang"
    AFTERNOON = "sore"
    EVENING = "malam"
    EARLY_MORNING = "dini hari"

    @property
    def default_hour(self) -> int:
        return TIME_OF_DAY_DEFAULTS[self]

    @property
    def hour_band(self) -> Tuple[int, int]:
        return TIME_OF_DAY_BANDS[self]

    @property
    def shifts_to_pm(self) -> bool:
        return self in PM_TIMES_OF_DAY


# (keyword, descriptor) in priority order
DATE_KEYWORDS: List[Tuple[str, DateDescriptor]] = [
    ("hari ini", DateDescriptor.TODAY),
    ("today", DateDescriptor.TODAY),
    ("besok", DateDescriptor.TOMORROW),
    ("tomorrow", DateDescriptor.TOMORROW),
    ("lusa", DateDescriptor.DAY_AFTER_TOMORROW),
]

DATE_OFFSETS: Dict[DateDescriptor, int] = {
    DateDescriptor.TODAY: 0,
    DateDescriptor.TOMORROW: 1,
    DateDescriptor.DAY_AFTER_TOMORROW: 2,
}

# Scan order: pagi, siang, sore, malam, dini hari
TIME_OF_DAY_KEYWORDS: List[Tuple[str, TimeOfDay]] = [
    (time_of_day.value, time_of_day) for time_of_day in TimeOfDay
]

# Inclusive hour ranges; hints only, never used for validation
TIME_OF_DAY_BANDS: Dict[TimeOfDay, Tuple[int, int]] = {
    TimeOfDay.MORNING: (5, 10),
    TimeOfDay.MIDDAY: (11, 14),
    TimeOfDay.AFTERNOON: (15, 17),
    TimeOfDay.EVENING: (18, 23),
    TimeOfDay.EARLY_MORNING: (0, 4),
}

TIME_OF_DAY_DEFAULTS: Dict[TimeOfDay, int] = {
    TimeOfDay.MORNING: 8,
    TimeOfDay.MIDDAY: 12,
    TimeOfDay.AFTERNOON: 16,
    TimeOfDay.EVENING: 19,
    TimeOfDay.EARLY_MORNING: 2,
}

# Words that turn a 1-11 literal hour into its afternoon/evening counterpart
PM_TIMES_OF_DAY = frozenset({TimeOfDay.AFTERNOON, TimeOfDay.EVENING})

# Words a clarification prompt offers for picking morning or evening
MERIDIEM_CHOICES: List[str] = [
    TimeOfDay.MORNING.value,
    TimeOfDay.MIDDAY.value,
    TimeOfDay.AFTERNOON.value,
    TimeOfDay.EVENING.value,
]

# Synonyms folded into a canonical keyword during normalization
SYNONYMS: Dict[str, str] = {
    "pukul": "jam",
}

CLOCK_WORDS: List[str] = ["jam", "pukul"]

FILLER_WORDS: List[str] = [
    "tolong",
    "ingatkan",
    "ingatkan saya",
    "remind me",
    "reminder",
    "ya",
    "dong",
    "please",
]

# Explicit clock times, tried in order on normalized text; groups are (hour, minute).
# The minute group takes every digit so "14:305" is read as one malformed token.
EXPLICIT_TIME_PATTERNS: List[str] = [
    r"\bjam\s+(\d{1,2})(?::(\d+))?(?!\d)",
    r"\b(\d{1,2}):(\d+)\b",
]

# Patterns stripped from the activity text before word removal
CLOCK_PATTERNS: List[str] = [
    r"\bjam\s+\d{1,2}(?::\d+)?(?!\d)",
    r"\bpukul\s+\d{1,2}(?::\d+)?(?!\d)",
    r"\b\d{1,2}:\d+\b",
]


def removal_words() -> List[str]:
    """Every word or phrase stripped from the activity text.

    Longer phrases come first so "ingatkan saya" is removed whole before
    "ingatkan" can split it.
    """
    words = (
        CLOCK_WORDS
        + [keyword for keyword, _ in DATE_KEYWORDS]
        + [keyword for keyword, _ in TIME_OF_DAY_KEYWORDS]
        + FILLER_WORDS
    )
    unique = list(dict.fromkeys(words))
    return sorted(unique, key=lambda word: (-len(word.split()), -len(word)))
