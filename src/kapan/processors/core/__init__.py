"""Temporal Processors

The four pipeline stages: normalization, intent extraction, resolution and
civil-to-instant conversion.
"""

from .normalizer import normalize, tokenize
from .vocabulary import DateDescriptor, TimeOfDay
from .intent_extractor import ExplicitTime, IntentExtractor, ParsedIntent, extract_intent
from .temporal_resolver import (
    NeedsClarification,
    Resolved,
    ResolutionResult,
    TemporalResolver,
    resolve,
)
from .instant_converter import (
    format_for_display,
    local_datetime_to_instant,
    to_absolute_instant,
)

__all__ = [
    "normalize",
    "tokenize",
    "DateDescriptor",
    "TimeOfDay",
    "ExplicitTime",
    "IntentExtractor",
    "ParsedIntent",
    "extract_intent",
    "NeedsClarification",
    "Resolved",
    "ResolutionResult",
    "TemporalResolver",
    "resolve",
    "format_for_display",
    "local_datetime_to_instant",
    "to_absolute_instant",
]
