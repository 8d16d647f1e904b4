"""HTTP middleware: timeout, request/correlation ID, access log, security headers.

Applied in main app; order matters (last added = outermost).
"""

from workorders.middleware.request_context import (
    AccessLogMiddleware,
    CorrelationIDMiddleware,
    RequestIDMiddleware,
)
from workorders.middleware.security_headers import SecurityHeadersMiddleware
from workorders.middleware.timeout import TimeoutMiddleware

__all__ = [
    "AccessLogMiddleware",
    "CorrelationIDMiddleware",
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
]
