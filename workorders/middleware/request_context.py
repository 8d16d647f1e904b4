"""Request ID, correlation ID and access-log middleware.

Request IDs are generated or forwarded (client values are sanitized to keep
log lines clean); correlation IDs fall back to the request ID. Both are
echoed on the response and stored on scope["state"]; the request ID is also
bound to the logging context so every log line of the request carries it.
Raw ASGI (no BaseHTTPMiddleware) so streaming responses are not buffered.
"""

import logging
import re
import time
import uuid
from typing import Callable

from workorders.shared.telemetry.logging import bind_request_id, reset_request_id

logger = logging.getLogger(__name__)

REQUEST_ID_MAX_LENGTH = 64
REQUEST_ID_ALLOWED_PATTERN = re.compile(
    r"^[a-zA-Z0-9_-]{1," + str(REQUEST_ID_MAX_LENGTH) + r"}$"
)


def _get_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive). Headers are (bytes, bytes)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def _sanitize_id(raw: str | None) -> str | None:
    """Return the stripped value if it is a safe identifier, else None."""
    if not raw:
        return None
    value = raw.strip()
    if not REQUEST_ID_ALLOWED_PATTERN.match(value):
        return None
    return value


def _with_response_header(send: Callable, name: str, value: str) -> Callable:
    async def send_wrapper(message: dict) -> None:
        if message["type"] == "http.response.start":
            headers = list(message.get("headers", []))
            headers.append((name.encode(), value.encode()))
            message["headers"] = headers
        await send(message)

    return send_wrapper


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Add or forward the request ID header on each request and response."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = _sanitize_id(_get_header(scope, header_name)) or str(uuid.uuid4())
        scope.setdefault("state", {})["request_id"] = request_id
        token = bind_request_id(request_id)
        try:
            await app(
                scope, receive, _with_response_header(send, header_name, request_id)
            )
        finally:
            reset_request_id(token)

    return asgi_app


def CorrelationIDMiddleware(
    app: Callable, header_name: str = "X-Correlation-ID"
) -> Callable:
    """Forward the correlation ID header; fall back to the request ID."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        state = scope.setdefault("state", {})
        correlation_id = (
            _sanitize_id(_get_header(scope, header_name))
            or state.get("request_id")
            or str(uuid.uuid4())
        )
        state["correlation_id"] = correlation_id
        await app(
            scope, receive, _with_response_header(send, header_name, correlation_id)
        )

    return asgi_app


def AccessLogMiddleware(app: Callable) -> Callable:
    """Log one line per HTTP request: method, path, status and duration."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        started = time.perf_counter()
        status_holder: dict[str, int] = {"status": 500}

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                status_holder["status"] = message["status"]
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        finally:
            logger.info(
                "%s %s -> %s (%.1f ms)",
                scope.get("method", ""),
                scope.get("path", ""),
                status_holder["status"],
                (time.perf_counter() - started) * 1000,
            )

    return asgi_app
