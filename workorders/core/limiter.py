"""SlowAPI rate limiting, keyed by client address.

Routes opt in with @limit_auth (login) or @limit_writes (POST/PATCH); a
decorated route must accept `request: Request`. create_app() attaches the
limiter to app.state and turns it off when RATE_LIMIT_ENABLED is false.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

LOGIN_LIMIT = "10/minute"
WRITE_ENDPOINT_LIMIT = "120/minute"

limiter = Limiter(key_func=get_remote_address)

limit_auth = limiter.limit(LOGIN_LIMIT)
limit_writes = limiter.limit(WRITE_ENDPOINT_LIMIT)
