"""Engine-wide constants.

The sheet endpoint is a fixed literal; callers that need another sheet pass a
URL to the source constructor (or `--url` on the CLI).
"""

from __future__ import annotations

SHEETBEST_URL = "https://api.sheetbest.com/sheets/8da0a252-39e0-44ce-8f44-67f91884b9c1"

HTTP_TIMEOUT_S = 20.0
HTTP_MAX_RETRIES = 3
HTTP_BACKOFF_S = 2.0

PAGE_SIZE = 6
# Number of page buttons shown around the current page.
PAGE_WINDOW = 5

NOTIFICATION_DURATION_S = 3.0
