"""SheetBest source connector.

The helper list lives in a spreadsheet exposed by SheetBest as a JSON array of
row objects keyed by the sheet's column headers.

Docs: https://docs.sheetbest.com/
"""

from __future__ import annotations

import time
from typing import Any, Dict, List, Optional

import httpx

from ..config import HTTP_BACKOFF_S, HTTP_MAX_RETRIES, HTTP_TIMEOUT_S, SHEETBEST_URL
from ..errors import HelperLoadError
from ..log import get_logger
from .base import HelperSource

log = get_logger(__name__)


class SheetBestSource(HelperSource):
    """Fetch helper rows from a SheetBest sheet."""

    name = "sheetbest"

    def __init__(
        self,
        url: str = SHEETBEST_URL,
        timeout_s: float = HTTP_TIMEOUT_S,
        max_retries: int = HTTP_MAX_RETRIES,
        backoff_s: float = HTTP_BACKOFF_S,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.url = url
        self._timeout = timeout_s
        self._max_retries = max_retries
        self._backoff_s = backoff_s
        self._transport = transport

    def _get(self, client: httpx.Client) -> httpx.Response:
        retries = 0
        while True:
            resp = client.get(self.url)
            if resp.status_code == 429 and retries < self._max_retries:
                sleep_s = self._backoff_s * (2**retries)
                log.warning("SheetBest rate limited, retrying in %.1fs", sleep_s)
                time.sleep(sleep_s)
                retries += 1
                continue
            return resp

    def fetch(self) -> List[Dict[str, Any]]:
        """Fetch all sheet rows.

        Raises:
            HelperLoadError: on a non-2xx status, a network error, a body that
                is not a JSON array, or an empty array.
        """
        try:
            with httpx.Client(timeout=self._timeout, follow_redirects=True, transport=self._transport) as client:
                resp = self._get(client)
                if not resp.is_success:
                    raise HelperLoadError(
                        f"Failed to fetch data: {resp.status_code} {resp.reason_phrase}",
                        status_code=resp.status_code,
                    )
                payload = resp.json()
        except httpx.HTTPError as exc:
            raise HelperLoadError(f"Failed to fetch data: {exc}") from exc
        except ValueError as exc:
            raise HelperLoadError("Response is not valid JSON") from exc

        if not isinstance(payload, list) or not payload:
            raise HelperLoadError("No data available in the response")

        log.debug("SheetBest returned %d rows", len(payload))
        return payload
