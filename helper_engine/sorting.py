"""Sort engine.

Sort keys come from the UI as "<key>-<direction>", e.g. "name-asc" or
"age-desc". An empty or unknown key leaves the filter order untouched.
Python's sort is stable in both directions, so equal keys keep filter order.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple

from .models import Helper
from .utils import int_or_zero

SORT_KEYS: Dict[str, Callable[[Helper], Any]] = {
    "name": lambda h: h.name.casefold(),
    "height": lambda h: int_or_zero(h.height),
    "weight": lambda h: int_or_zero(h.weight),
    "age": lambda h: h.age or 0,
}


def parse_sort(sort_by: Optional[str]) -> Optional[Tuple[str, bool]]:
    """Split "height-desc" into ("height", True). Returns None for no/unknown key."""
    if not sort_by:
        return None
    key, _, order = sort_by.strip().partition("-")
    if key not in SORT_KEYS:
        return None
    return key, order == "desc"


def sort_helpers(helpers: List[Helper], sort_by: Optional[str]) -> List[Helper]:
    """Return a new list ordered by `sort_by`."""
    parsed = parse_sort(sort_by)
    if parsed is None:
        return list(helpers)
    key, descending = parsed
    return sorted(helpers, key=SORT_KEYS[key], reverse=descending)
