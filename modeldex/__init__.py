"""Modeldex: browse AI models found by a generative search service."""

from .client import SearchClient
from .controller import SearchController
from .errors import ErrorKind, ModeldexError, RecordValidationError, SearchError
from .models import ModelRecord, validate_records
from .session import ResultSession, filter_by_pricing
from .view_state import DetailView, ListView, ViewState

__all__ = [
    "ModelRecord",
    "validate_records",
    "ResultSession",
    "filter_by_pricing",
    "ListView",
    "DetailView",
    "ViewState",
    "SearchClient",
    "SearchController",
    "ErrorKind",
    "ModeldexError",
    "RecordValidationError",
    "SearchError",
]
