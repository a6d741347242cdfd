"""Shared fixtures: sheet rows, decoded helpers and an in-memory source."""

from datetime import date
from typing import Any, Dict, List

import pytest

from helper_engine.errors import HelperLoadError
from helper_engine.normalize import decode_helper
from helper_engine.sources.base import HelperSource

TODAY = date(2024, 6, 15)


def make_row(**overrides: Any) -> Dict[str, Any]:
    """A fully populated sheet row; keyword overrides use the sheet column names with spaces as underscores."""
    row = {
        "MDW Code": "MDW-001",
        "MDW Status": "Available",
        "MDW Name": "Maria Santos",
        "Nationality": "Filipino",
        "MDW Experience": "Experienced",
        "MDW DOB": "1 Jan 1990",
        "MDW Height": "155 cm",
        "MDW Weight": "50 kg",
        "Rest Day Arrangement": "4 rest days",
        "Domestic Houskeeping": "TRUE",
        "Cooking": "TRUE",
        "Elder Care": "FALSE",
        "Child Care": "TRUE",
        "Infant Care": "FALSE",
        "Pet Care": "FALSE",
        "Interviewer Comments": "Good English, cheerful",
        "Expected Salary": "$700-$800",
        "Religion": "Catholic",
    }
    for key, value in overrides.items():
        row[key.replace("_", " ")] = value
    return row


def make_helper(**overrides: Any):
    return decode_helper(make_row(**overrides), today=TODAY)


class StaticSource(HelperSource):
    """Source that returns canned rows, or raises a canned error."""

    name = "static"

    def __init__(self, rows: List[Dict[str, Any]], error: HelperLoadError | None = None) -> None:
        self.rows = rows
        self.error = error
        self.calls = 0

    def fetch(self) -> List[Dict[str, Any]]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.rows


@pytest.fixture
def rows() -> List[Dict[str, Any]]:
    """Thirteen browsable rows plus one row of each terminal status."""
    out = [
        make_row(MDW_Code=f"MDW-{i:03d}", MDW_Name=f"Helper {chr(ord('A') + i)}", MDW_Height=f"{150 + i} cm")
        for i in range(13)
    ]
    out.append(make_row(MDW_Code="MDW-R", MDW_Name="Rita Rejected", MDW_Status="Rejected by employer"))
    out.append(make_row(MDW_Code="MDW-V", MDW_Name="Vera Void", MDW_Status="VOID"))
    out.append(make_row(MDW_Code="MDW-S", MDW_Name="Sara Selected", MDW_Status="Selected"))
    return out
