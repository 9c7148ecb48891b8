"""Async HTTP client for the model search API."""

import logging

import httpx

from modeldex.errors import ERROR_MESSAGES, ErrorKind, RecordValidationError, SearchError
from modeldex.models import ModelRecord, validate_records

logger = logging.getLogger(__name__)

DEFAULT_SERVER_URL = "http://127.0.0.1:8000"
SEARCH_PATH = "/api/search"

_STATUS_KINDS = {
    400: ErrorKind.INVALID_REQUEST,
    405: ErrorKind.METHOD_NOT_ALLOWED,
}

# Both upstream failures arrive as HTTP 500; the body message tells them apart
_FORMAT_ERROR_MESSAGE = ERROR_MESSAGES[ErrorKind.UPSTREAM_FORMAT_ERROR]


class SearchClient:
    """Posts queries to the search API and validates the returned records.

    Args:
        base_url: Root URL of the search API
        timeout: Request timeout in seconds
        client: Pre-built httpx.AsyncClient (its base_url is used as-is)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_SERVER_URL,
        timeout: float = 60.0,
        client: httpx.AsyncClient | None = None,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def search(self, query: str) -> list[ModelRecord]:
        """
        Run one search.

        Raises:
            SearchError: On transport failure, a non-200 response or a payload
                that is not a list of valid records
        """
        try:
            response = await self._client.post(SEARCH_PATH, json={"query": query})
        except httpx.HTTPError as e:
            logger.error(f"Search request failed: {type(e).__name__}: {e}")
            raise SearchError(
                ErrorKind.UPSTREAM_UNAVAILABLE, "Could not reach the search service"
            ) from e

        if response.status_code != 200:
            message = _error_message(response)
            kind = _STATUS_KINDS.get(response.status_code, ErrorKind.UPSTREAM_UNAVAILABLE)
            if response.status_code == 500 and message == _FORMAT_ERROR_MESSAGE:
                kind = ErrorKind.UPSTREAM_FORMAT_ERROR
            logger.warning(f"Search returned HTTP {response.status_code}: {message}")
            raise SearchError(kind, message)

        try:
            return validate_records(response.json())
        except (ValueError, RecordValidationError) as e:
            logger.error(f"Search response could not be parsed: {e}")
            raise SearchError(
                ErrorKind.UPSTREAM_FORMAT_ERROR, "The search service returned an unexpected response"
            ) from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "SearchClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def _error_message(response: httpx.Response) -> str:
    fallback = f"Server error: {response.reason_phrase or response.status_code}"
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict) and isinstance(body.get("error"), str) and body["error"]:
        return body["error"]
    return fallback
