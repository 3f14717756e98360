"""Text normalization for temporal keyword detection."""

import re
from typing import List

from .vocabulary import SYNONYMS

_WHITESPACE = re.compile(r"\s+")
# Trailing marks, including any spaces between them
_TRAILING_PUNCTUATION = " .,!?"
_SYNONYM_PATTERNS = [
    (re.compile(rf"\b{re.escape(word)}\b"), canonical)
    for word, canonical in SYNONYMS.items()
]


def normalize(raw: str) -> str:
    """Normalize a message for keyword scanning.

    Lowercases, collapses whitespace, strips trailing ``.,!?`` and folds
    synonyms ("pukul" becomes "jam").

    Args:
        raw: Message as typed by the user

    Returns:
        Normalized text; empty input gives an empty string
    """
    normalized = _WHITESPACE.sub(" ", raw.lower()).strip()
    normalized = normalized.rstrip(_TRAILING_PUNCTUATION)

    for pattern, canonical in _SYNONYM_PATTERNS:
        normalized = pattern.sub(canonical, normalized)

    return normalized


def tokenize(raw: str) -> List[str]:
    """Split a message into normalized tokens."""
    normalized = normalize(raw)
    return normalized.split(" ") if normalized else []
