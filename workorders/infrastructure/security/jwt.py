"""Bearer access tokens (HS256 JWT via python-jose).

A token carries the user id in "sub", the role at issue time in "role",
plus "iat" and "exp". The role claim is informational: request handling
re-reads the role from the stored user so that role changes apply at once.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from workorders.core.config import get_settings


@dataclass(frozen=True)
class TokenClaims:
    """Verified claims of an access token."""

    sub: str
    role: str | None
    expires_at: datetime


def create_access_token(
    user_id: str,
    role: str | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """Issue a signed token for user_id.

    Args:
        user_id: Stored in the "sub" claim.
        role: Optional role claim.
        expires_delta: Lifetime; defaults to settings.access_token_expire_minutes.
    """
    settings = get_settings()
    issued_at = datetime.now(UTC)
    lifetime = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    claims: dict[str, object] = {
        "sub": user_id,
        "iat": issued_at,
        "exp": issued_at + lifetime,
    }
    if role:
        claims["role"] = role
    return jwt.encode(
        claims, settings.secret_key.get_secret_value(), algorithm=settings.algorithm
    )


def verify_token(token: str) -> TokenClaims:
    """Check signature and expiry and return the claims.

    Raises:
        ValueError: If the token is malformed, badly signed, expired, or
            lacks "sub" or "exp".
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    sub = payload.get("sub")
    if not sub:
        raise ValueError("Token missing required claim: sub")
    return TokenClaims(
        sub=sub,
        role=payload.get("role"),
        expires_at=datetime.fromtimestamp(payload["exp"], tz=UTC),
    )
