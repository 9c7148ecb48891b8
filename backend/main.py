"""
Modeldex API.

FastAPI application that turns a free-text query into a list of AI model
summaries produced by a generative model.
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.api import search
from backend.config import settings
from backend.models.common import HealthResponse
from backend.rate_limit import limiter
from backend.services.search_service import API_KEY_ENV

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application lifespan handler for startup and shutdown."""
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    logger.info(f"Generative model: {settings.generative_model}")
    logger.info(f"CORS origins: {settings.cors_origins}")
    if not os.environ.get(API_KEY_ENV):
        logger.warning(f"{API_KEY_ENV} is not set; searches will fail until it is configured")
    yield
    logger.info("Shutting down Modeldex API")


# Create FastAPI app
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description=settings.api_description,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# Register rate limiter
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type", "Accept"],
)

# Include routers
app.include_router(search.router)


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    """Add security headers to all responses."""
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    response.headers["X-XSS-Protection"] = "0"
    # Strict CSP for API routes; skip for docs pages that need inline scripts
    if request.url.path not in ("/docs", "/redoc", "/openapi.json"):
        response.headers["Content-Security-Policy"] = "default-src 'none'"
    return response


@app.get("/health", response_model=HealthResponse)
async def health_check(response: Response):
    """
    Health check endpoint.

    Reports whether a provider credential is present, never its value.
    """
    response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"

    configured = bool(os.environ.get(API_KEY_ENV))
    return HealthResponse(
        status="healthy" if configured else "degraded",
        version=settings.api_version,
        generative_service="configured" if configured else "unconfigured",
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(_request: Request, exc: RequestValidationError):
    """
    Handle validation errors and return 400 instead of 422.
    """
    logger.warning(f"Validation error: {exc.errors()}")

    errors = exc.errors()
    error_msg = "Invalid request"

    if errors:
        first_error = errors[0]
        loc = first_error.get("loc", ())
        if first_error.get("type") == "missing":
            field = loc[-1] if loc else "body"
            error_msg = "Query is required" if field in ("query", "body") else f"{field} is required"
        elif first_error.get("type") == "json_invalid":
            error_msg = "Request body must be valid JSON"
        else:
            error_msg = first_error.get("msg", error_msg)

    return JSONResponse(status_code=400, content={"error": error_msg})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(_request: Request, exc: StarletteHTTPException):
    """
    Render HTTP errors (404, 405, ...) with the same {"error": ...} body.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def global_exception_handler(_request, exc):
    """
    Global exception handler for unhandled errors.
    """
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content={"error": "An unexpected error occurred"},
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "backend.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level="info",
    )
