"""Unit tests for JWT creation/verification and password hashing."""

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from workorders.infrastructure.security import (
    create_access_token,
    get_password_hash,
    verify_password,
    verify_token,
)


class TestJwt:
    def test_round_trip_claims(self) -> None:
        token = create_access_token("user-1", role="MANAGER")
        claims = verify_token(token)
        assert claims.sub == "user-1"
        assert claims.role == "MANAGER"
        assert claims.expires_at > datetime.now(UTC)

    def test_role_claim_optional(self) -> None:
        assert verify_token(create_access_token("user-1")).role is None

    def test_expired_token_rejected(self) -> None:
        token = create_access_token("user-1", expires_delta=timedelta(seconds=-5))
        with pytest.raises(ValueError, match="Invalid token"):
            verify_token(token)

    def test_garbage_token_rejected(self) -> None:
        with pytest.raises(ValueError):
            verify_token("not-a-jwt")

    def test_token_signed_with_other_key_rejected(self) -> None:
        token = jwt.encode({"sub": "user-1", "exp": 9999999999}, "other-key", algorithm="HS256")
        with pytest.raises(ValueError):
            verify_token(token)


class TestPasswordHashing:
    def test_hash_and_verify(self) -> None:
        hashed = get_password_hash("correct horse battery")
        assert hashed != "correct horse battery"
        assert verify_password("correct horse battery", hashed)
        assert not verify_password("wrong password", hashed)

    def test_long_password_not_truncated(self) -> None:
        """Passwords that differ only after 72 bytes must not verify against each other."""
        base = "x" * 80
        hashed = get_password_hash(base + "a")
        assert not verify_password(base + "b", hashed)

    def test_malformed_hash_returns_false(self) -> None:
        assert verify_password("anything", "not-a-bcrypt-hash") is False
