"""Filter engine.

All predicates are combined with AND. Helpers with a terminal status
(rejected, withdrawn, selected) are dropped before any user predicate runs.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .models import Helper, NumericRange, SearchCriteria, Skill
from .utils import int_or_zero, split_terms


def browsable(helpers: Iterable[Helper]) -> List[Helper]:
    """The base pool: every helper without a terminal status, in input order."""
    return [h for h in helpers if h.is_browsable]


def _searchable_fields(h: Helper) -> List[str]:
    return [h.name.lower(), h.comments.lower(), h.experience.lower(), h.rest_day.lower(), h.salary.lower()]


def matches_terms(h: Helper, terms: List[str]) -> bool:
    """Every term must occur in at least one searchable field."""
    if not terms:
        return True
    fields = _searchable_fields(h)
    return all(any(t in f for f in fields) for t in terms)


def has_skills(h: Helper, skills: Iterable[Skill]) -> bool:
    return all(h.has_skill(s) for s in skills)


def _equals(value: str, wanted: Optional[str]) -> bool:
    return not wanted or value.lower() == wanted.lower()


def _in_range(value: int, rng: Optional[NumericRange]) -> bool:
    return rng is None or rng.contains(value)


def matches(h: Helper, criteria: SearchCriteria, terms: Optional[List[str]] = None) -> bool:
    """Check one helper against every active predicate of `criteria`."""
    if terms is None:
        terms = split_terms(criteria.search)
    return (
        matches_terms(h, terms)
        and has_skills(h, criteria.skills)
        and _equals(h.nationality, criteria.nationality)
        and _equals(h.experience, criteria.experience)
        and _equals(h.religion, criteria.religion)
        and _in_range(int_or_zero(h.height), criteria.height)
        and _in_range(int_or_zero(h.weight), criteria.weight)
        and _in_range(h.salary_value, criteria.salary)
    )


def filter_helpers(helpers: Iterable[Helper], criteria: SearchCriteria) -> List[Helper]:
    """Return browsable helpers satisfying `criteria`, preserving input order."""
    terms = split_terms(criteria.search)
    return [h for h in browsable(helpers) if matches(h, criteria, terms)]
