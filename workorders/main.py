"""ASGI entry point: `uvicorn workorders.main:app`.

create_app() only wires things together (lifespan, limiter, error handlers,
middleware, routers). Settings are read inside it, so tests can adjust the
environment before the module is imported.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from workorders.api.v1 import api_router
from workorders.core.config import Settings, get_settings
from workorders.core.exception_handlers import register_exception_handlers
from workorders.core.lifespan import create_lifespan
from workorders.core.limiter import limiter
from workorders.middleware import (
    AccessLogMiddleware,
    CorrelationIDMiddleware,
    RequestIDMiddleware,
    SecurityHeadersMiddleware,
    TimeoutMiddleware,
)


def _add_middleware(app: FastAPI, settings: Settings) -> None:
    # add_middleware prepends: the last one added sees the request first.
    # Inbound order: timeout, request ID, correlation ID, access log,
    # security headers, CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", settings.request_id_header],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(CorrelationIDMiddleware, header_name=settings.correlation_id_header)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(TimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)


def create_app() -> FastAPI:
    """Build the FastAPI application from the current settings."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    limiter.enabled = settings.rate_limit_enabled
    app.state.limiter = limiter
    register_exception_handlers(app)
    _add_middleware(app, settings)
    app.include_router(api_router, prefix="/api/v1")
    return app


app = create_app()
