"""Business logic services."""

from .search_service import QueryService, SearchOutcome, get_query_service

__all__ = ["QueryService", "SearchOutcome", "get_query_service"]
