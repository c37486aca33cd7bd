"""PetMall API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from petmall.api.health import router as health_router
from petmall.api.middleware import error_response, setup_middleware
from petmall.api.products import router as products_router
from petmall.api.wishes import router as wishes_router
from petmall.domain.exceptions import DomainError
from petmall.infrastructure.config import settings
from petmall.infrastructure.database import engine
from petmall.infrastructure.logging_setup import configure_logging

configure_logging(settings.log_level, json_output=settings.log_json)
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    logger.info(
        "Starting PetMall API",
        version=settings.api_version,
        debug=settings.debug,
    )

    yield

    logger.info("Shutting down PetMall API")
    await engine.dispose()


app = FastAPI(
    title="PetMall API",
    description="Pet supplies catalog and wishlist service",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup custom middleware (request ID, error handling)
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(products_router)
app.include_router(wishes_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc: HTTPException):
    """Handle HTTP exceptions with consistent format."""
    detail = exc.detail
    if isinstance(detail, dict):
        return error_response(
            request,
            exc.status_code,
            detail.get("error_code", "ERROR"),
            detail.get("message", str(detail)),
        )
    return error_response(request, exc.status_code, "ERROR", str(detail))


@app.exception_handler(DomainError)
async def domain_exception_handler(request, exc: DomainError):
    """Handle domain errors that no router translated."""
    logger.warning(
        "Untranslated domain error",
        path=request.url.path,
        error_code=exc.error_code,
        error=exc.message,
    )
    return error_response(request, 400, exc.error_code, exc.message)


@app.exception_handler(Exception)
async def generic_exception_handler(request, exc):
    """Handle uncaught exceptions with consistent format."""
    logger.exception(
        "Unhandled exception in handler",
        path=request.url.path,
        method=request.method,
        error=str(exc),
    )
    return error_response(request, 500, "INTERNAL_ERROR", "An internal error occurred")
