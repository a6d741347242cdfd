"""Directory controller.

The controller owns all session state: the original snapshot of loaded
helpers, the working list, the current filtered list, the active criteria and
the current page. A UI drives it through commands that each return a
`PageResult` to paint, and receives transient feedback through a
notification callback.

Load and reset replace the working lists wholesale, so nothing else mutates
state between two commands.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, List, Optional, Tuple

from . import pagination
from .config import PAGE_SIZE
from .errors import HelperLoadError
from .filters import browsable, filter_helpers
from .log import get_logger
from .models import Helper, Notification, PageResult, SearchCriteria, Severity
from .sorting import sort_helpers
from .sources.base import HelperSource, load_helpers
from .utils import plural

log = get_logger(__name__)

Notifier = Callable[[Notification], None]


def log_notification(note: Notification) -> None:
    """Default notifier: write the notification to the log."""
    log.info("[%s] %s", note.level, note.message)


class DirectoryController:
    """Browse session over one helper source."""

    def __init__(
        self,
        source: HelperSource,
        notify: Optional[Notifier] = None,
        page_size: int = PAGE_SIZE,
        today: Optional[date] = None,
    ) -> None:
        self.source = source
        self.page_size = page_size
        self._notify = notify or log_notification
        self._today = today

        self._original: Tuple[Helper, ...] = ()
        self.helpers: List[Helper] = []
        self.filtered: List[Helper] = []
        self.criteria = SearchCriteria()
        self.current_page = 1

    # -- queries ---------------------------------------------------------

    @property
    def original(self) -> Tuple[Helper, ...]:
        return self._original

    @property
    def total_pages(self) -> int:
        return pagination.total_pages(len(self.filtered), self.page_size)

    def summary(self) -> str:
        return f"{plural(len(self.filtered), 'Helper')} Found"

    def current(self) -> PageResult:
        """The page currently on screen."""
        pages = self.total_pages
        return PageResult(
            records=pagination.get_page(self.filtered, self.current_page, self.page_size),
            page=self.current_page,
            total_pages=pages,
            page_buttons=pagination.page_window(self.current_page, pages),
            has_prev=pagination.has_prev(self.current_page),
            has_next=pagination.has_next(self.current_page, pages),
            total_count=len(self.filtered),
            summary=self.summary(),
            page_info=pagination.page_info(self.current_page, pages),
        )

    # -- commands --------------------------------------------------------

    def load(self) -> PageResult:
        """Fetch the helper list and show the first page of the base pool.

        Failures are reported through the result and a notification; calling
        `load()` again is the retry.
        """
        try:
            helpers = load_helpers(self.source, today=self._today)
        except HelperLoadError as exc:
            log.error("Failed to load helpers: %s", exc)
            self._emit("Failed to load helper data", "error")
            return PageResult(
                error=str(exc) or "Please check your connection and try again later.",
                summary="Error loading data",
            )

        self._original = tuple(helpers)
        self.helpers = list(self._original)
        self.criteria = SearchCriteria()
        self.filtered = browsable(self.helpers)
        self.current_page = 1
        self._emit("Helpers data loaded successfully!", "success")
        return self.current()

    def apply_filters(self, criteria: SearchCriteria) -> PageResult:
        """Filter, sort and jump back to page 1."""
        self.criteria = criteria
        self.filtered = sort_helpers(filter_helpers(self.helpers, criteria), criteria.sort)
        self.current_page = 1
        log.debug("Criteria %s matched %d helpers", criteria.model_dump(exclude_defaults=True), len(self.filtered))
        if self.filtered:
            self._emit(f"Found {len(self.filtered)} helpers", "success")
        else:
            self._emit("No helpers found with current filters", "info")
        return self.current()

    def reset(self) -> PageResult:
        """Clear all criteria and restore the working list from the snapshot."""
        self.helpers = list(self._original)
        self.criteria = SearchCriteria()
        self.filtered = browsable(self.helpers)
        self.current_page = 1
        self._emit("Filters have been reset", "info")
        return self.current()

    def go_to_page(self, page: int) -> PageResult:
        """Jump to a page; pages outside 1..total_pages are ignored."""
        if 1 <= page <= self.total_pages:
            self.current_page = page
        return self.current()

    def next_page(self) -> PageResult:
        if self.current_page < self.total_pages:
            self.current_page += 1
        return self.current()

    def prev_page(self) -> PageResult:
        if self.current_page > 1:
            self.current_page -= 1
        return self.current()

    def _emit(self, message: str, level: Severity) -> None:
        self._notify(Notification(message=message, level=level))
