"""Kapan - Indonesian/English Temporal Expression Resolver

Resolves reminder messages such as "besok jam 6 sore minum obat" into a
civil date and time, or into a clarifying question when the hour is
ambiguous.
"""

import logging

from .interpreter import TemporalInterpreter, parse_temporal_expression
from .processors.core import (
    NeedsClarification,
    Resolved,
    ResolutionResult,
    format_for_display,
    local_datetime_to_instant,
    to_absolute_instant,
)

__version__ = "0.1.0"
__author__ = "Kapan Team"
__description__ = "Indonesian/English temporal expression resolver"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "TemporalInterpreter",
    "parse_temporal_expression",
    "NeedsClarification",
    "Resolved",
    "ResolutionResult",
    "format_for_display",
    "local_datetime_to_instant",
    "to_absolute_instant",
]
