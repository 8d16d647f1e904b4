"""Exception-to-response mapping for the FastAPI app.

Every error body has the same shape:

    {"error": <code>, "message": <text>, "details": <object>, "request_id": <id>}

Domain exceptions carry their own error_code; STATUS_BY_ERROR_CODE turns it
into an HTTP status. Install with register_exception_handlers(app).
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from workorders.core.config import get_settings
from workorders.domain.exceptions import WorkOrderException

logger = logging.getLogger(__name__)

STATUS_BY_ERROR_CODE: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "AUTHENTICATION_ERROR": 401,
    "PERMISSION_DENIED": 403,
    "RESOURCE_NOT_FOUND": 404,
    "SERVICE_UNAVAILABLE": 503,
}


def error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    details: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build the JSON error body, tagged with the request ID when one was assigned."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "message": message,
            "details": details if details is not None else {},
            "request_id": getattr(request.state, "request_id", None),
        },
        headers=headers,
    )


def _domain_error(request: Request, exc: WorkOrderException) -> JSONResponse:
    status = STATUS_BY_ERROR_CODE.get(exc.error_code, 400)
    if status >= 500:
        logger.error("%s: %s", exc.error_code, exc.message)
    return error_response(
        request,
        status,
        exc.error_code,
        exc.message,
        exc.details,
        headers={"WWW-Authenticate": "Bearer"} if status == 401 else None,
    )


def _request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed query/path/typed-body parameters: 422 with FastAPI's error list."""
    return error_response(
        request,
        422,
        "VALIDATION_ERROR",
        "Request validation failed",
        {"errors": exc.errors()},
    )


def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(
        request,
        exc.status_code,
        "HTTP_ERROR",
        str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


def _rate_limited(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    return error_response(
        request,
        429,
        "RATE_LIMITED",
        f"Rate limit exceeded: {exc.detail}",
    )


def _unhandled(request: Request, exc: Exception) -> JSONResponse:
    """500; the exception text is only exposed when debug is on."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return error_response(request, 500, "INTERNAL_ERROR", message)


def register_exception_handlers(app: FastAPI) -> None:
    """Register every handler on the app. Call once from create_app()."""
    app.add_exception_handler(WorkOrderException, _domain_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RateLimitExceeded, _rate_limited)
    app.add_exception_handler(Exception, _unhandled)
