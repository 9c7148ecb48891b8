"""
Event handlers for the model browser.

Each handler runs to completion before the next event is processed. The only
suspension point is the search request itself; a search that is overtaken by a
newer one never touches the session when it finally returns.
"""

import logging

from modeldex.client import SearchClient
from modeldex.errors import SearchError
from modeldex.models import ModelRecord
from modeldex.session import ResultSession

logger = logging.getLogger(__name__)

CATEGORIES = [
    "Text Generation",
    "Image Generation",
    "Code Generation",
    "Video Generation",
    "Speech Recognition",
    "Translation",
]

PRICING_OPTIONS = ["all", "Free", "Freemium", "Subscription", "One-time Purchase"]

UNEXPECTED_ERROR_MESSAGE = "Something went wrong while searching"


class SearchController:
    """Connects user events to a SearchClient and a ResultSession."""

    def __init__(self, client: SearchClient, session: ResultSession | None = None):
        self.client = client
        self.session = session or ResultSession()

    async def submit(self, query: str) -> bool:
        """
        Run a search for the query.

        A blank query is ignored: no request is sent and the session is left
        untouched.

        Returns:
            True if this search's outcome (results or error) was applied
        """
        query = query.strip()
        if not query:
            return False

        sequence = self.session.begin_search(query)
        try:
            results = await self.client.search(query)
        except SearchError as e:
            logger.error(f"Error fetching AI models for {query!r}: {e.kind.value}: {e.message}")
            return self.session.fail_search(sequence, e.message)
        except Exception as e:
            logger.error(f"Unexpected error searching for {query!r}: {type(e).__name__}: {e}", exc_info=True)
            return self.session.fail_search(sequence, UNEXPECTED_ERROR_MESSAGE)

        applied = self.session.complete_search(sequence, results)
        if applied:
            logger.info(f"Search {query!r} returned {len(results)} models")
        return applied

    async def choose_category(self, category: str) -> bool:
        """Search for a category shortcut, by name or 1-based number."""
        if category.isdigit():
            number = int(category)
            if not 1 <= number <= len(CATEGORIES):
                raise ValueError(f"No category #{number}")
            category = CATEGORIES[number - 1]
        return await self.submit(category)

    def change_filter(self, value: str) -> None:
        self.session.set_filter(value)

    def open(self, number: int) -> ModelRecord:
        """Open the detail view for the card numbered `number` in the current list."""
        visible = self.session.derive_view()
        if not 1 <= number <= len(visible):
            raise ValueError(f"No model #{number} in the current list")
        model = visible[number - 1]
        self.session.select_model(model)
        return model

    def back(self) -> None:
        self.session.deselect()
