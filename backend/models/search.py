"""Search-related models."""

from pydantic import BaseModel, ConfigDict, Field

from backend.config import settings
from modeldex.models import ModelRecord


class SearchRequest(BaseModel):
    """Request body for POST /api/search."""

    model_config = ConfigDict(strict=True)

    query: str = Field(
        ..., max_length=settings.max_query_length, description="Free-text search query"
    )


SearchResponse = list[ModelRecord]
