"""API middleware and error envelope for PetMall.

Every response carries an ``X-Request-ID`` header, and every error body
has the same shape: ``{error_code, message, details, request_id}``.
"""

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from petmall.api.schemas import ErrorResponse

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"

# Polled by orchestrators; logged at debug to keep request logs readable
PROBE_PATHS = frozenset({"/health", "/ready"})


def error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: list | None = None,
) -> JSONResponse:
    """Render an error in the API's standard envelope.

    Args:
        request: Request being answered; supplies the request ID.
        status_code: HTTP status.
        error_code: Machine-readable error code.
        message: Human-readable message.
        details: Optional per-field error details.

    Returns:
        JSON response with an ``ErrorResponse`` body.
    """
    body = ErrorResponse(
        error_code=error_code,
        message=message,
        details=details or [],
        request_id=getattr(request.state, "request_id", None),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


# ============================================================================
# Request ID Middleware
# ============================================================================


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Tag each request with a correlation ID and log its outcome.

    The ID comes from the ``X-Request-ID`` header when the caller sends
    one. It is stored on ``request.state``, bound into structlog's
    context for the duration of the request, and echoed back.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        started = time.perf_counter()
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            self._log_request(request, status_code, time.perf_counter() - started)
            structlog.contextvars.unbind_contextvars("request_id")

        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @staticmethod
    def _log_request(request: Request, status_code: int, elapsed: float) -> None:
        if status_code >= 500:
            log = logger.warning
        elif request.url.path in PROBE_PATHS:
            log = logger.debug
        else:
            log = logger.info

        log(
            "Request completed",
            method=request.method,
            path=request.url.path,
            query=str(request.query_params) or None,
            status_code=status_code,
            duration_ms=round(elapsed * 1000, 2),
        )


# ============================================================================
# Error Handling Middleware
# ============================================================================


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Last-resort handler turning escaped exceptions into a 500 envelope."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.exception(
                "Unhandled exception",
                path=request.url.path,
                method=request.method,
                error=str(e),
            )
            return error_response(
                request,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "INTERNAL_ERROR",
                "An internal error occurred",
            )


def setup_middleware(app: FastAPI) -> None:
    """Install PetMall middleware on the application.

    The request ID middleware is added last so it runs first and the
    error handler can read the ID from ``request.state``.

    Args:
        app: FastAPI application instance.
    """
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(RequestIdMiddleware)
