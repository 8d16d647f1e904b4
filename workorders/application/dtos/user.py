"""DTOs for users and the acting identity (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserResult:
    """User read-model (result of get_by_id, authenticate, etc.). No password."""

    id: str
    name: str
    email: str
    role: str
    is_active: bool


@dataclass(frozen=True)
class Actor:
    """Authenticated identity performing a request.

    role is kept as a plain string: access control decides what an
    unrecognized role may do rather than failing at construction.
    """

    id: str
    role: str
