"""Helper directory engine package.

The package is structured like a small product core:
- `models.py` defines the canonical helper record and the query/result types.
- `sources/` contains the connector that fetches raw sheet rows.
- `normalize.py` decodes raw rows and computes derived fields (age, salary).
- `filters.py`, `sorting.py`, `pagination.py` form the browse pipeline.
- `controller.py` owns the session state and exposes commands to any UI.
"""

from .controller import DirectoryController
from .errors import HelperDecodeError, HelperEngineError, HelperLoadError
from .models import Helper, NumericRange, PageResult, SearchCriteria, Skill

__all__ = [
    "DirectoryController",
    "Helper",
    "HelperDecodeError",
    "HelperEngineError",
    "HelperLoadError",
    "NumericRange",
    "PageResult",
    "SearchCriteria",
    "Skill",
]
