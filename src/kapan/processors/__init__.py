"""Data Processing Module

Processors that turn reminder messages into scheduled civil times.
"""

from .core import IntentExtractor, ParsedIntent, TemporalResolver, ResolutionResult

__all__ = [
    "IntentExtractor",
    "ParsedIntent",
    "TemporalResolver",
    "ResolutionResult",
]
