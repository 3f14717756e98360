"""Temporal Interpreter

Entry point that runs a message through normalization, intent extraction
and resolution, and converts resolved reminders into absolute instants.
"""

import logging
from datetime import datetime
from typing import Optional

from .core.config_manager import ResolverConfig
from .core.logging_manager import LoggingManager
from .processors.core.instant_converter import format_for_display, get_zone, to_absolute_instant
from .processors.core.intent_extractor import IntentExtractor, ParsedIntent
from .processors.core.messages import resolve_locale
from .processors.core.normalizer import normalize
from .processors.core.temporal_resolver import Resolved, ResolutionResult, TemporalResolver


class TemporalInterpreter:
    """Resolves reminder messages for one timezone and locale."""

    def __init__(self, config: Optional[ResolverConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """Initialize interpreter.

        Args:
            config: Resolver settings (timezone, locale, fallback hour)
            logger: Logger shared by every stage
        """
        self.config = config or ResolverConfig()
        self.logger = logger or LoggingManager.get_logger(__name__)

        self.extractor = IntentExtractor(locale=self.config.locale, logger=self.logger)
        self.resolver = TemporalResolver(
            zone=self.config.timezone,
            locale=self.config.locale,
            fallback_hour=self.config.fallback_hour,
            logger=self.logger
        )

    @property
    def timezone(self) -> str:
        return self.config.timezone

    def normalize(self, message: str) -> str:
        return normalize(message)

    def extract_intent(self, message: str) -> ParsedIntent:
        return self.extractor.extract(message)

    def resolve(self, intent: ParsedIntent,
                reference_instant: Optional[datetime] = None) -> ResolutionResult:
        return self.resolver.resolve(intent, reference_instant)

    def parse(self, message: str,
              reference_instant: Optional[datetime] = None) -> ResolutionResult:
        """Resolve a free-form message.

        Args:
            message: Text such as "besok jam 6 sore minum obat"
            reference_instant: "Now" (defaults to the current time in the
                configured timezone)

        Returns:
            ``Resolved`` or ``NeedsClarification``
        """
        self.logger.debug(f"Parsing temporal expression: {message!r}")
        return self.resolve(self.extract_intent(message), reference_instant)

    def to_instant(self, result: Resolved) -> datetime:
        """UTC instant for a resolved reminder in the configured timezone."""
        return to_absolute_instant(result.iso_date, result.iso_time, self.timezone)

    def format_for_display(self, result: Resolved) -> str:
        return format_for_display(
            result.iso_date, result.iso_time, self.timezone, self.config.locale
        )


def parse_temporal_expression(
    message: str,
    reference_instant: Optional[datetime] = None,
    timezone: Optional[str] = None,
    locale: Optional[str] = None
) -> ResolutionResult:
    """Resolve a message with default settings.

    Args:
        message: Free-form reminder text
        reference_instant: "Now"; defaults to the current time
        timezone: Target civil timezone (defaults to Asia/Jakarta)
        locale: "id" or "en" for prompts and the placeholder label

    Returns:
        ``Resolved`` or ``NeedsClarification``
    """
    overrides = {}
    if timezone:
        get_zone(timezone)
        overrides["timezone"] = timezone
    if locale:
        overrides["locale"] = resolve_locale(locale)
    return TemporalInterpreter(ResolverConfig(**overrides)).parse(message, reference_instant)
