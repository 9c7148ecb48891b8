"""Error kinds and exceptions shared by the search service and its clients."""

from enum import Enum


class ErrorKind(str, Enum):
    """Terminal failure categories for a single search attempt."""

    INVALID_REQUEST = "InvalidRequest"
    UPSTREAM_UNAVAILABLE = "UpstreamUnavailable"
    UPSTREAM_FORMAT_ERROR = "UpstreamFormatError"
    METHOD_NOT_ALLOWED = "MethodNotAllowed"


class ModeldexError(Exception):
    """Base exception for modeldex errors."""


class RecordValidationError(ModeldexError):
    """A payload could not be validated as a list of model records."""


class SearchError(ModeldexError):
    """A search failed; carries the error kind and a user-facing message."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


# Messages the search service returns in {"error": ...} bodies
ERROR_MESSAGES = {
    ErrorKind.INVALID_REQUEST: "Query is required",
    ErrorKind.UPSTREAM_UNAVAILABLE: "Failed to fetch AI models from the API.",
    ErrorKind.UPSTREAM_FORMAT_ERROR: "The AI service returned results in an unexpected format.",
}
