"""Base classes for source connectors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Dict, List, Optional

from ..log import get_logger
from ..models import Helper
from ..normalize import decode_helpers

log = get_logger(__name__)


class HelperSource(ABC):
    """Abstract base class for a helper list connector."""

    name: str

    @abstractmethod
    def fetch(self) -> List[Dict[str, Any]]:
        """Fetch raw rows keyed by sheet column name.

        Raises:
            HelperLoadError: the list could not be fetched or is empty.
        """
        raise NotImplementedError


def load_helpers(source: HelperSource, today: Optional[date] = None) -> List[Helper]:
    """Fetch rows from `source` and decode them into canonical records."""
    rows = source.fetch()
    helpers = decode_helpers(rows, today=today)
    log.info("Loaded %d helpers from %s", len(helpers), source.name)
    return helpers
