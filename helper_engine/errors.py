"""Exceptions raised by the helper engine."""

from __future__ import annotations

from typing import List


class HelperEngineError(Exception):
    """Base class for all engine errors."""


class HelperLoadError(HelperEngineError):
    """The helper list could not be fetched (HTTP status, network, empty payload)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HelperDecodeError(HelperEngineError):
    """A raw row is missing columns of the field table (strict decoding only)."""

    def __init__(self, missing: List[str]) -> None:
        super().__init__(f"Row is missing columns: {', '.join(missing)}")
        self.missing = missing
