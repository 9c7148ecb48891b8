"""
Result session state for the model browser.

Holds the current result set, the active pricing filter and the list/detail
view state. The filtered view is always recomputed from (results, filter) and
never stored.

Searches are tagged with a monotonically increasing sequence number so that a
response arriving after a newer search has started is discarded instead of
overwriting the newer state.
"""

import logging
from collections.abc import Iterable, Sequence

from modeldex.models import ModelRecord
from modeldex.view_state import DetailView, ListView, ViewState

logger = logging.getLogger(__name__)

ALL_PRICING = "all"


def is_all_pricing(filter_value: str) -> bool:
    """Return True if the filter value means "no pricing filter"."""
    return filter_value.strip().lower() == ALL_PRICING


def filter_by_pricing(results: Sequence[ModelRecord], filter_value: str) -> list[ModelRecord]:
    """
    Derive the visible records for a pricing filter.

    Args:
        results: Records in relevance order
        filter_value: "all" or a pricing label

    Returns:
        All records when the filter is "all", otherwise the records whose
        pricing model equals the filter case-insensitively, in original order.
    """
    if is_all_pricing(filter_value):
        return list(results)
    wanted = filter_value.lower()
    return [r for r in results if r.pricing_model.lower() == wanted]


class ResultSession:
    """Client-side state for one browsing session."""

    def __init__(self) -> None:
        self._results: tuple[ModelRecord, ...] = ()
        self._filter: str = ALL_PRICING
        self._view_state: ViewState = ListView()
        self._sequence = 0
        self.query: str | None = None
        self.loading = False
        self.error: str | None = None

    @property
    def results(self) -> tuple[ModelRecord, ...]:
        return self._results

    @property
    def filter(self) -> str:
        return self._filter

    @property
    def view_state(self) -> ViewState:
        return self._view_state

    @property
    def sequence(self) -> int:
        """Sequence number of the most recently started search."""
        return self._sequence

    # -- operations ---------------------------------------------------------

    def new_search(self, results: Iterable[ModelRecord]) -> None:
        """Replace the result set, reset the filter and return to the list."""
        self._results = tuple(results)
        self._filter = ALL_PRICING
        self.error = None
        self._view_state = ListView()

    def set_filter(self, value: str) -> None:
        """Change the pricing filter. The view state is left alone."""
        self._filter = value

    def derive_view(self) -> list[ModelRecord]:
        """Records visible under the current filter."""
        return filter_by_pricing(self._results, self._filter)

    def select_model(self, model: ModelRecord) -> None:
        """Open the detail view for a record."""
        if not isinstance(model, ModelRecord):
            raise TypeError(f"Expected ModelRecord, got {type(model).__name__}")
        self._view_state = DetailView(model)

    def deselect(self) -> None:
        """Go back to the list view."""
        self._view_state = ListView()

    # -- search lifecycle ---------------------------------------------------

    def begin_search(self, query: str) -> int:
        """
        Start a new search and return its sequence number.

        The previous result set is discarded immediately.
        """
        self._sequence += 1
        self.query = query
        self.loading = True
        self.new_search(())
        logger.debug(f"Search #{self._sequence} started: {query!r}")
        return self._sequence

    def is_current(self, sequence: int) -> bool:
        return sequence == self._sequence

    def complete_search(self, sequence: int, results: Iterable[ModelRecord]) -> bool:
        """
        Apply the results of a search.

        Returns:
            False if the search has been superseded and its results were dropped
        """
        if not self.is_current(sequence):
            logger.debug(f"Dropping stale results for search #{sequence} (latest #{self._sequence})")
            return False
        self.loading = False
        self.new_search(results)
        return True

    def fail_search(self, sequence: int, message: str) -> bool:
        """
        Record a failed search. Any results are discarded.

        Returns:
            False if the search has been superseded and the failure was dropped
        """
        if not self.is_current(sequence):
            logger.debug(f"Dropping stale failure for search #{sequence} (latest #{self._sequence})")
            return False
        self.loading = False
        self.new_search(())
        self.error = message
        return True
