"""Pydantic models for API requests and responses."""

from .common import ErrorResponse, HealthResponse
from .search import ModelRecord, SearchRequest, SearchResponse

__all__ = [
    "ModelRecord",
    "SearchRequest",
    "SearchResponse",
    "ErrorResponse",
    "HealthResponse",
]
