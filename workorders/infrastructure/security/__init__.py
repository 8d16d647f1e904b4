"""Security: bearer tokens and password hashing."""

from workorders.infrastructure.security.jwt import (
    TokenClaims,
    create_access_token,
    verify_token,
)
from workorders.infrastructure.security.password import get_password_hash, verify_password

__all__ = [
    "TokenClaims",
    "create_access_token",
    "get_password_hash",
    "verify_password",
    "verify_token",
]
