"""Logging configuration with a per-request ID on every record.

RequestIDMiddleware binds the current request ID with bind_request_id();
RequestIdFilter copies it onto each LogRecord so the format can include
%(request_id)s. Records emitted outside a request show "-".
"""

import logging
import sys
from contextvars import ContextVar, Token

from workorders.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"

_request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


def bind_request_id(request_id: str) -> Token[str]:
    """Set the request ID for log records in the current context."""
    return _request_id_var.set(request_id)


def reset_request_id(token: Token[str]) -> None:
    _request_id_var.reset(token)


def current_request_id() -> str:
    return _request_id_var.get()


class RequestIdFilter(logging.Filter):
    """Attach the bound request ID to each record as record.request_id."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _request_id_var.get()
        return True


def setup_logging() -> None:
    """Configure application-wide logging on stdout.

    Level is DEBUG when settings.debug is True, otherwise INFO. SQL statement
    logging follows settings.database_echo. Safe to call more than once.
    """
    settings = get_settings()
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        handlers=[handler],
        force=True,
    )
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.database_echo else logging.WARNING
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name (usually __name__)."""
    return logging.getLogger(name)
