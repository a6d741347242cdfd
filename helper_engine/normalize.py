"""Row decoding & derived fields.

This module contains the deterministic parsing logic:
- a fixed field table mapping sheet columns to canonical `Helper` fields
- status categorization (rejected / withdrawn / selected / available)
- skill flag decoding from sheet tokens
- age computation from "D MMM YYYY" dates
- salary ceiling extraction from free-text salary strings

Keeping the column names in one table means a renamed sheet column shows up as
a missing column at decode time instead of a silently empty field.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Any, Callable, Dict, Iterable, List, Mapping, NamedTuple, Optional

from .errors import HelperDecodeError
from .log import get_logger
from .models import Helper, StatusCategory
from .utils import leading_int, text_or_default

log = get_logger(__name__)


MONTHS = ["jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec"]

_DIGITS_RE = re.compile(r"\d+")


def _strip_unit(unit: str) -> Callable[[Any], str]:
    def convert(value: Any) -> str:
        return text_or_default(value, "").replace(unit, "", 1).strip()

    return convert


def _sheet_token(value: Any) -> Any:
    # Native JSON booleans are compared as the sheet's own TRUE/FALSE tokens.
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    return value


def _true_unless(token: str) -> Callable[[Any], bool]:
    def convert(value: Any) -> bool:
        return _sheet_token(value) != token

    return convert


def _true_only_if(token: str) -> Callable[[Any], bool]:
    def convert(value: Any) -> bool:
        return _sheet_token(value) == token

    return convert


def _text(default: str) -> Callable[[Any], str]:
    def convert(value: Any) -> str:
        return text_or_default(value, default)

    return convert


class Column(NamedTuple):
    field: str
    source: str
    convert: Callable[[Any], Any]


# Housekeeping and cooking default to True unless the sheet says exactly
# "FALSE" / "False"; the four care skills are True only for exactly "TRUE".
# The two policies disagree and the sheet owner has not confirmed which one is
# intended, so both are kept as the sheet currently behaves.
FIELD_TABLE: List[Column] = [
    Column("code", "MDW Code", _text("N/A")),
    Column("status", "MDW Status", _text("Available")),
    Column("name", "MDW Name", _text("Unknown")),
    Column("nationality", "Nationality", _text("Unknown")),
    Column("experience", "MDW Experience", _text("Not specified")),
    Column("dob", "MDW DOB", _text("")),
    Column("height", "MDW Height", _strip_unit("cm")),
    Column("weight", "MDW Weight", _strip_unit("kg")),
    Column("rest_day", "Rest Day Arrangement", _text("Not specified")),
    Column("housekeeping", "Domestic Houskeeping", _true_unless("FALSE")),
    Column("cooking", "Cooking", _true_unless("False")),
    Column("elder_care", "Elder Care", _true_only_if("TRUE")),
    Column("child_care", "Child Care", _true_only_if("TRUE")),
    Column("infant_care", "Infant Care", _true_only_if("TRUE")),
    Column("pet_care", "Pet Care", _true_only_if("TRUE")),
    Column("comments", "Interviewer Comments", _text("No comments available")),
    Column("salary", "Expected Salary", _text("Not specified")),
    Column("religion", "Religion", _text("Not specified")),
]

SOURCE_COLUMNS: List[str] = [c.source for c in FIELD_TABLE]


def compute_age(dob: Optional[str], today: Optional[date] = None) -> Optional[int]:
    """Compute age in whole years from a "D MMM YYYY" string (e.g. "1 Jan 1990").

    Returns None for empty input, a wrong token count, an unparsable day or
    year, an unknown month abbreviation, or a date that does not exist.
    """
    if not dob:
        return None

    parts = dob.strip().split(" ")
    if len(parts) != 3:
        return None

    day = leading_int(parts[0])
    year = leading_int(parts[2])
    month_str = parts[1].lower()
    if month_str not in MONTHS or day is None or year is None:
        return None

    try:
        born = date(year, MONTHS.index(month_str) + 1, day)
    except (ValueError, OverflowError):
        return None

    today = today or date.today()
    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return age


def extract_salary_ceiling(text: Optional[str]) -> int:
    """Return the largest integer found in a salary string, or 0 if there is none.

    "$800-$1000" -> 1000, "$650" -> 650, "Negotiable" -> 0. Digit runs longer
    than `MAX_INT_DIGITS` are skipped.
    """
    if not text:
        return 0
    nums = [n for n in (leading_int(m) for m in _DIGITS_RE.findall(text)) if n is not None]
    return max(nums) if nums else 0


def categorize_status(status: str) -> StatusCategory:
    """Map free-text status onto a category by case-insensitive substring match."""
    s = (status or "").lower()
    if "rejected" in s:
        return "rejected"
    # The sheet marks withdrawn candidates as "void".
    if "void" in s:
        return "withdrawn"
    if "selected" in s:
        return "selected"
    return "available"


def decode_helper(raw: Mapping[str, Any], strict: bool = False, today: Optional[date] = None) -> Helper:
    """Decode one sheet row into a `Helper`.

    Args:
        raw: Row keyed by the sheet's human-readable column names.
        strict: If True, raise `HelperDecodeError` when any column of the
            field table is absent from the row. Otherwise absent columns
            fall back to their placeholders.
        today: Reference date for the age calculation (defaults to today).
    """
    missing = [c.source for c in FIELD_TABLE if c.source not in raw]
    if missing and strict:
        raise HelperDecodeError(missing)

    values: Dict[str, Any] = {c.field: c.convert(raw.get(c.source)) for c in FIELD_TABLE}
    values["status_category"] = categorize_status(values["status"])
    values["age"] = compute_age(values["dob"], today=today)
    values["salary_value"] = extract_salary_ceiling(values["salary"])
    return Helper(**values, raw=dict(raw))


def missing_columns(rows: Iterable[Mapping[str, Any]]) -> List[str]:
    """Return field-table columns that appear in none of the rows."""
    seen = set()
    for r in rows:
        if isinstance(r, Mapping):
            seen.update(r.keys())
    return [c for c in SOURCE_COLUMNS if c not in seen]


def decode_helpers(rows: Iterable[Mapping[str, Any]], today: Optional[date] = None) -> List[Helper]:
    """Decode every row, warning once about columns the sheet no longer has."""
    rows = list(rows)
    absent = missing_columns(rows)
    if rows and absent:
        log.warning("Sheet rows are missing columns %s; placeholders will be used", absent)
    non_objects = sum(1 for r in rows if not isinstance(r, Mapping))
    if non_objects:
        log.warning("%d sheet rows are not objects; decoding them as empty rows", non_objects)
    helpers = [decode_helper(r if isinstance(r, Mapping) else {}, today=today) for r in rows]
    log.debug("Decoded %d helpers from %d rows", len(helpers), len(rows))
    return helpers
