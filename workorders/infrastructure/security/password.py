"""Password hashing for user accounts (bcrypt over a SHA-256 digest).

bcrypt only reads the first 72 bytes of its input, so the password is first
reduced to a base64 SHA-256 digest (44 bytes) and that digest is hashed.
"""

import base64
import hashlib

import bcrypt

BCRYPT_ROUNDS = 12


def _digest(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def get_password_hash(password: str) -> str:
    """Return the bcrypt hash to store for password."""
    hashed = bcrypt.hashpw(_digest(password), bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if plain_password matches the stored hash; False on mismatch or bad hash."""
    try:
        return bool(bcrypt.checkpw(_digest(plain_password), hashed_password.encode("utf-8")))
    except (ValueError, TypeError):
        return False
