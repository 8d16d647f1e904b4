"""Telemetry: logging setup and request-scoped log context."""

from workorders.shared.telemetry.logging import (
    bind_request_id,
    current_request_id,
    get_logger,
    reset_request_id,
    setup_logging,
)

__all__ = [
    "bind_request_id",
    "current_request_id",
    "get_logger",
    "reset_request_id",
    "setup_logging",
]
