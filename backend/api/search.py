"""
Search API endpoint.

POST /api/search takes {"query": "..."} and returns a JSON array of model
records, or {"error": "..."} with a 4xx/5xx status.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from backend.config import settings
from backend.models.common import ErrorResponse
from backend.models.search import SearchRequest, SearchResponse
from backend.rate_limit import limiter
from backend.services import QueryService, get_query_service
from modeldex.errors import ErrorKind

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["search"])

STATUS_CODES = {
    ErrorKind.INVALID_REQUEST: 400,
    ErrorKind.UPSTREAM_UNAVAILABLE: 500,
    ErrorKind.UPSTREAM_FORMAT_ERROR: 500,
}


@router.post(
    "/search",
    response_model=SearchResponse,
    responses={
        400: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
@limiter.limit(settings.search_rate_limit)
def search(
    request_body: SearchRequest,
    request: Request,  # noqa: ARG001 - required by slowapi limiter
    service: QueryService = Depends(get_query_service),
):
    """
    Find AI models related to a free-text query.

    An empty array is a valid answer and is returned with status 200.
    """
    outcome = service.search(request_body.query)

    if not outcome.ok:
        status_code = STATUS_CODES[outcome.error]
        logger.warning(f"Search failed with {outcome.error.value} (HTTP {status_code})")
        return JSONResponse(status_code=status_code, content={"error": outcome.message})

    return outcome.results
