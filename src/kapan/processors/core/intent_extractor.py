"""Intent Extractor for Indonesian/English Reminder Messages

Scans a message for relative-day keywords, vague time-of-day words and
explicit clock times, and recovers the remaining activity text.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Pattern

from ...core.logging_manager import LoggingManager
from . import messages
from .normalizer import normalize
from .vocabulary import (
    CLOCK_PATTERNS,
    DATE_KEYWORDS,
    EXPLICIT_TIME_PATTERNS,
    TIME_OF_DAY_KEYWORDS,
    DateDescriptor,
    TimeOfDay,
    removal_words,
)


@dataclass(frozen=True)
class ExplicitTime:
    """Clock time written by the user, before any meridiem decision."""
    hour: int
    minute: int = 0
    text: str = ""

    def __post_init__(self):
        if not self.text:
            object.__setattr__(self, "text", str(self.hour))


@dataclass
class ParsedIntent:
    """Signals found in one message."""
    activity_text: str
    raw_input: str
    date_descriptor: Optional[DateDescriptor] = None
    relative_offset_days: Optional[int] = None
    time_of_day: Optional[TimeOfDay] = None
    explicit_time: Optional[ExplicitTime] = None

    @property
    def has_temporal_signal(self) -> bool:
        return (
            self.date_descriptor is not None
            or self.time_of_day is not None
            or self.explicit_time is not None
        )


class IntentExtractor:
    """Extracts temporal signals and activity text from a message."""

    def __init__(self, locale: str = messages.DEFAULT_LOCALE,
                 logger: Optional[logging.Logger] = None):
        """Initialize extractor with compiled keyword tables.

        Args:
            locale: Locale for the placeholder activity label
            logger: Logger for diagnostics (defaults to the module logger)
        """
        self.locale = messages.resolve_locale(locale)
        self.logger = logger or LoggingManager.get_logger(__name__)

        self.time_patterns = self._build_time_patterns()
        self.clock_patterns = self._build_clock_patterns()
        self.word_patterns = self._build_word_patterns()

    def _build_time_patterns(self) -> List[Pattern]:
        return [re.compile(pattern) for pattern in EXPLICIT_TIME_PATTERNS]

    def _build_clock_patterns(self) -> List[Pattern]:
        return [re.compile(pattern, re.IGNORECASE) for pattern in CLOCK_PATTERNS]

    def _build_word_patterns(self) -> List[Pattern]:
        """Compile one whole-word pattern per removable word or phrase.

        Phrase words may be separated by any run of whitespace in the raw
        message.
        """
        patterns = []
        for word in removal_words():
            body = r"\s+".join(re.escape(part) for part in word.split())
            patterns.append(re.compile(rf"\b{body}\b", re.IGNORECASE))
        return patterns

    def extract(self, message: str) -> ParsedIntent:
        """Extract temporal intent from a message.

        Args:
            message: Raw message text

        Returns:
            Parsed intent; unrecognised input yields fewer fields, never an error
        """
        normalized = normalize(message)
        self.logger.debug(f"Extracting temporal intent from: {normalized!r}")

        date_descriptor = self._find_date_descriptor(normalized)
        time_of_day = self._find_time_of_day(normalized)
        explicit_time = self._find_explicit_time(normalized)

        intent = ParsedIntent(
            activity_text=self.recover_activity_text(message),
            raw_input=message,
            date_descriptor=date_descriptor,
            relative_offset_days=date_descriptor.offset_days if date_descriptor else None,
            time_of_day=time_of_day,
            explicit_time=explicit_time
        )

        self.logger.debug(
            f"Extracted intent: date={date_descriptor and date_descriptor.value}, "
            f"time_of_day={time_of_day and time_of_day.value}, "
            f"explicit_time={explicit_time and explicit_time.text}, "
            f"activity={intent.activity_text!r}"
        )
        return intent

    def _find_date_descriptor(self, normalized: str) -> Optional[DateDescriptor]:
        for keyword, descriptor in DATE_KEYWORDS:
            if keyword in normalized:
                return descriptor
        return None

    def _find_time_of_day(self, normalized: str) -> Optional[TimeOfDay]:
        for keyword, time_of_day in TIME_OF_DAY_KEYWORDS:
            if keyword in normalized:
                return time_of_day
        return None

    def _find_explicit_time(self, normalized: str) -> Optional[ExplicitTime]:
        """Return the first in-range clock time, trying each pattern in turn."""
        for pattern in self.time_patterns:
            for match in pattern.finditer(normalized):
                parsed = self._parse_clock(match.group(1), match.group(2))
                if parsed:
                    return parsed
        return None

    def _parse_clock(self, hour_text: str, minute_text: Optional[str]) -> Optional[ExplicitTime]:
        """Build a clock time, keeping a valid hour when only the minute is bad."""
        hour = int(hour_text)
        if hour > 23:
            self.logger.debug(f"Ignoring out-of-range hour {hour_text}")
            return None

        if minute_text is None:
            return ExplicitTime(hour=hour, minute=0, text=hour_text)

        if len(minute_text) != 2 or int(minute_text) > 59:
            self.logger.debug(f"Ignoring minute {minute_text!r}, keeping hour {hour_text}")
            return ExplicitTime(hour=hour, minute=0, text=hour_text)

        return ExplicitTime(hour=hour, minute=int(minute_text), text=f"{hour_text}:{minute_text}")

    def recover_activity_text(self, message: str) -> str:
        """Strip temporal and filler vocabulary from the original message.

        Casing of the remaining words is preserved for the user-facing label.
        """
        activity = message
        for pattern in self.clock_patterns:
            activity = pattern.sub(" ", activity)
        for pattern in self.word_patterns:
            activity = pattern.sub(" ", activity)

        activity = re.sub(r"\s+", " ", activity)
        activity = activity.strip(" .,!?;:")

        return activity or messages.placeholder_label(self.locale)


def extract_intent(message: str, locale: str = messages.DEFAULT_LOCALE,
                   logger: Optional[logging.Logger] = None) -> ParsedIntent:
    """Extract temporal intent with a throwaway extractor."""
    return IntentExtractor(locale=locale, logger=logger).extract(message)

