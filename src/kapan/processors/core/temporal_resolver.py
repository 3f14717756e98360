"""Temporal Resolver

Turns a parsed intent into a concrete civil date and time, or into a
clarifying question when the signals cannot pick a single hour.

Policy:
    * a literal hour of 12 or more is taken as 24-hour time; hour 0 is midnight
    * a literal hour 1-11 is shifted by 12 when "sore" or "malam" is present,
      kept when "pagi", "siang" or "dini hari" is present, and is ambiguous
      otherwise
    * a time-of-day word alone resolves to its default hour
    * a relative day alone is ambiguous (no time was given)
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Dict, Optional, Union

from ...core.config_manager import DEFAULT_TIMEZONE
from ...core.logging_manager import LoggingManager
from . import messages
from .instant_converter import get_zone, to_absolute_instant
from .intent_extractor import ParsedIntent

RESOLVED = "resolved"
NEEDS_CLARIFICATION = "needs_clarification"

DEFAULT_FALLBACK_HOUR = 9


@dataclass(frozen=True)
class Resolved:
    """A message resolved to a civil date and time."""
    activity_text: str
    iso_date: str
    iso_time: str
    display_string: str
    zone: str = DEFAULT_TIMEZONE

    status = RESOLVED

    def to_instant(self, zone: Optional[str] = None) -> datetime:
        """UTC instant of this reminder.

        The civil time is read in ``zone``, or in the zone it was resolved
        for when none is given.
        """
        return to_absolute_instant(self.iso_date, self.iso_time, zone or self.zone)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "activityText": self.activity_text,
            "isoDate": self.iso_date,
            "isoTime": self.iso_time,
            "formattedReminder": self.display_string,
        }


@dataclass(frozen=True)
class NeedsClarification:
    """A message that needs a follow-up question before it can be scheduled."""
    activity_text: str
    clarification_prompt: str

    status = NEEDS_CLARIFICATION

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "activityText": self.activity_text,
            "clarificationPrompt": self.clarification_prompt,
        }


ResolutionResult = Union[Resolved, NeedsClarification]


@dataclass(frozen=True)
class _TimeDecision:
    hour: int
    minute: int
    ambiguous: bool = False


def format_reminder(activity_text: str, iso_date: str, iso_time: str) -> str:
    return f"{activity_text} — {iso_date} — {iso_time}"


class TemporalResolver:
    """Applies the disambiguation policy to parsed intents."""

    def __init__(
        self,
        zone: str = DEFAULT_TIMEZONE,
        locale: str = messages.DEFAULT_LOCALE,
        fallback_hour: int = DEFAULT_FALLBACK_HOUR,
        logger: Optional[logging.Logger] = None
    ):
        """Initialize resolver.

        Args:
            zone: Timezone whose civil calendar the reference instant is read in
            locale: Locale for clarification prompts
            fallback_hour: Hour recorded when only a relative day was given
            logger: Logger for diagnostics (defaults to the module logger)
        """
        self.zone = zone
        self.tzinfo = get_zone(zone)
        self.locale = messages.resolve_locale(locale)
        self.fallback_hour = fallback_hour
        self.logger = logger or LoggingManager.get_logger(__name__)

    def resolve(self, intent: ParsedIntent,
                reference_instant: Optional[datetime] = None) -> ResolutionResult:
        """Resolve an intent against a reference instant.

        Args:
            intent: Output of the intent extractor
            reference_instant: "Now"; naive values are read as civil time in
                the resolver's zone, aware values are converted into it

        Returns:
            ``Resolved`` or ``NeedsClarification``
        """
        if not intent.has_temporal_signal:
            self.logger.debug("No temporal signal found, asking for date and time")
            return self._ask_date_and_time(intent)

        try:
            target_date = self.resolve_date(intent, reference_instant)
        except OverflowError as e:
            self.logger.warning(f"Reference date out of range, asking for date and time: {e}")
            return self._ask_date_and_time(intent)

        decision = self.resolve_time(intent)

        if decision.ambiguous:
            if intent.explicit_time is not None:
                self.logger.debug(
                    f"Hour {intent.explicit_time.text} is ambiguous without a time-of-day word"
                )
                return NeedsClarification(
                    activity_text=intent.activity_text,
                    clarification_prompt=messages.ask_meridiem(
                        intent.activity_text,
                        intent.explicit_time.text,
                        intent.date_descriptor,
                        self.locale
                    )
                )
            self.logger.debug("Relative day without a time, asking for date and time")
            return self._ask_date_and_time(intent)

        iso_date = target_date.isoformat()
        iso_time = f"{decision.hour:02d}:{decision.minute:02d}"

        result = Resolved(
            activity_text=intent.activity_text,
            iso_date=iso_date,
            iso_time=iso_time,
            display_string=format_reminder(intent.activity_text, iso_date, iso_time),
            zone=self.zone
        )
        self.logger.info(f"Resolved: {result.display_string}")
        return result

    def resolve_date(self, intent: ParsedIntent,
                     reference_instant: Optional[datetime] = None) -> date:
        """Civil date of the reference instant plus the intent's day offset."""
        offset = intent.relative_offset_days or 0
        return self.reference_date(reference_instant) + timedelta(days=offset)

    def reference_date(self, reference_instant: Optional[datetime] = None) -> date:
        if reference_instant is None:
            return datetime.now(self.tzinfo).date()
        if reference_instant.tzinfo is None:
            return reference_instant.date()
        return reference_instant.astimezone(self.tzinfo).date()

    def resolve_time(self, intent: ParsedIntent) -> _TimeDecision:
        """Pick hour and minute, flagging the cases that need a question."""
        explicit = intent.explicit_time
        time_of_day = intent.time_of_day

        if explicit is not None:
            if explicit.hour >= 12 or explicit.hour == 0:
                return _TimeDecision(explicit.hour, explicit.minute)
            if time_of_day is not None:
                hour = explicit.hour + 12 if time_of_day.shifts_to_pm else explicit.hour
                return _TimeDecision(hour, explicit.minute)
            return _TimeDecision(explicit.hour, explicit.minute, ambiguous=True)

        if time_of_day is not None:
            return _TimeDecision(time_of_day.default_hour, 0)

        return _TimeDecision(self.fallback_hour, 0, ambiguous=True)

    def _ask_date_and_time(self, intent: ParsedIntent) -> NeedsClarification:
        return NeedsClarification(
            activity_text=intent.activity_text,
            clarification_prompt=messages.ask_date_and_time(intent.activity_text, self.locale)
        )


def resolve(intent: ParsedIntent, reference_instant: Optional[datetime] = None,
            zone: str = DEFAULT_TIMEZONE, locale: str = messages.DEFAULT_LOCALE) -> ResolutionResult:
    """Resolve an intent with a throwaway resolver."""
    return TemporalResolver(zone=zone, locale=locale).resolve(intent, reference_instant)
