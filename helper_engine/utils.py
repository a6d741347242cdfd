"""Utility helpers shared across the engine."""

from __future__ import annotations

import re
from typing import Any, List, Optional

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_TERM_SPLIT_RE = re.compile(r"[,\s]+")

# Longer digit runs are treated as garbage rather than numbers.
MAX_INT_DIGITS = 18


def leading_int(value: Any) -> Optional[int]:
    """Parse the integer prefix of a string ("155.5" -> 155, "1st" -> 1).

    Returns None when the string does not start with digits, or when the
    digit run is longer than `MAX_INT_DIGITS`.
    """
    if value is None:
        return None
    m = _LEADING_INT_RE.match(str(value))
    if not m or len(m.group(1).lstrip("+-")) > MAX_INT_DIGITS:
        return None
    return int(m.group(1))


def int_or_zero(value: Any) -> int:
    """Leading-integer parse with 0 as the fallback for absent/unparsable values."""
    return leading_int(value) or 0


def split_terms(text: Optional[str]) -> List[str]:
    """Split free text on commas/whitespace into lowercase, non-empty terms."""
    return [t.lower() for t in _TERM_SPLIT_RE.split((text or "").strip()) if t]


def text_or_default(value: Any, default: str) -> str:
    """Return the value as text, or the default for any falsy value (None, "", 0, False)."""
    if not value:
        return default
    return value if isinstance(value, str) else str(value)


def plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"
