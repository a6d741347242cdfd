"""Data models for the helper engine.

The key idea: the engine owns a *stable* canonical record regardless of how the
upstream sheet names or fills its columns. We also keep the `raw` row so it
can be re-decoded later without re-fetching.

This file uses Pydantic v2.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from .config import NOTIFICATION_DURATION_S


StatusCategory = Literal["available", "rejected", "withdrawn", "selected"]
Severity = Literal["success", "error", "info"]


class Skill(str, Enum):
    """Skill flags a helper can be filtered on; values match `Helper` attributes."""

    HOUSEKEEPING = "housekeeping"
    COOKING = "cooking"
    CHILD_CARE = "child_care"
    INFANT_CARE = "infant_care"
    ELDER_CARE = "elder_care"
    PET_CARE = "pet_care"

    @property
    def label(self) -> str:
        return SKILL_LABELS[self]


SKILL_LABELS: Dict[Skill, str] = {
    Skill.HOUSEKEEPING: "Housekeeping",
    Skill.COOKING: "Cooking",
    Skill.CHILD_CARE: "Child Care",
    Skill.INFANT_CARE: "Infant Care",
    Skill.ELDER_CARE: "Elder Care",
    Skill.PET_CARE: "Pet Care",
}


class Helper(BaseModel):
    """A normalized helper (MDW candidate) record.

    Every text field is populated; placeholders stand in for missing sheet
    values. `age` and `salary_value` are derived at decode time.
    """

    code: str = "N/A"
    status: str = "Available"
    status_category: StatusCategory = "available"
    name: str = "Unknown"
    nationality: str = "Unknown"
    experience: str = "Not specified"
    dob: str = Field(default="", description="Date of birth as written in the sheet, e.g. '1 Jan 1990'.")
    height: str = Field(default="", description="Height in cm, unit stripped.")
    weight: str = Field(default="", description="Weight in kg, unit stripped.")
    rest_day: str = "Not specified"

    housekeeping: bool = True
    cooking: bool = True
    child_care: bool = False
    infant_care: bool = False
    elder_care: bool = False
    pet_care: bool = False

    comments: str = "No comments available"
    salary: str = Field(default="Not specified", description="Expected salary as free text, e.g. '$800-$1000'.")
    religion: str = "Not specified"

    age: Optional[int] = Field(default=None, description="Age in whole years; None when the DOB is unusable.")
    salary_value: int = Field(default=0, description="Largest number found in the salary text.")

    raw: Dict[str, Any] = Field(default_factory=dict, description="Original sheet row.")

    @property
    def is_rejected(self) -> bool:
        return self.status_category == "rejected"

    @property
    def is_withdrawn(self) -> bool:
        return self.status_category == "withdrawn"

    @property
    def is_selected(self) -> bool:
        return self.status_category == "selected"

    @property
    def is_browsable(self) -> bool:
        """Terminal statuses are never part of the browsable pool."""
        return self.status_category == "available"

    def has_skill(self, skill: Skill) -> bool:
        return bool(getattr(self, skill.value))

    @property
    def skills(self) -> List[Skill]:
        return [s for s in Skill if self.has_skill(s)]


class NumericRange(BaseModel):
    """Inclusive numeric range; `high=None` means unbounded above."""

    low: float = 0
    high: Optional[float] = None

    def contains(self, value: float) -> bool:
        if value < self.low:
            return False
        return self.high is None or value <= self.high

    @classmethod
    def parse(cls, text: Optional[str]) -> Optional["NumericRange"]:
        """Parse select-style range values such as "150-160" or "1000-".

        Empty text means "no constraint" and yields None.
        """
        text = (text or "").strip()
        if not text:
            return None
        low_s, _, high_s = text.partition("-")
        try:
            low = float(low_s) if low_s.strip() else 0
            high = float(high_s) if high_s.strip() else None
        except ValueError as exc:
            raise ValueError(f"Invalid range {text!r}; expected 'min-max'") from exc
        return cls(low=low, high=high)


class SearchCriteria(BaseModel):
    """Everything a UI can ask the filter and sort engines for."""

    search: str = Field(default="", description="Comma/space separated terms, all must match.")
    nationality: Optional[str] = None
    experience: Optional[str] = None
    religion: Optional[str] = None
    height: Optional[NumericRange] = None
    weight: Optional[NumericRange] = None
    salary: Optional[NumericRange] = None
    skills: List[Skill] = Field(default_factory=list)
    sort: str = Field(default="", description="'<key>-<asc|desc>' with key in name/height/weight/age.")

    @field_validator("height", "weight", "salary", mode="before")
    @classmethod
    def _parse_range(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return NumericRange.parse(value)
        return value


class PageResult(BaseModel):
    """One rendered page plus the state a UI needs to draw pagination."""

    records: List[Helper] = Field(default_factory=list)
    page: int = 1
    total_pages: int = 0
    page_buttons: List[int] = Field(default_factory=list)
    has_prev: bool = False
    has_next: bool = False
    total_count: int = 0
    summary: str = ""
    page_info: str = ""
    error: Optional[str] = Field(default=None, description="Load failure message; the UI offers a retry.")


class Notification(BaseModel):
    """Transient user feedback; the UI dismisses it after `duration_s`."""

    message: str
    level: Severity
    duration_s: float = NOTIFICATION_DURATION_S
