"""User repository with password helpers. Interface methods return application DTOs."""

from __future__ import annotations

import asyncio

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from workorders.application.dtos.user import UserResult
from workorders.domain.enums import UserRole
from workorders.infrastructure.persistence.models.user import User
from workorders.infrastructure.persistence.repositories.base import BaseRepository
from workorders.infrastructure.security.password import get_password_hash, verify_password

# Lazy dummy hash for constant-time comparison when user is not found (timing-attack mitigation).
# Computed on first use in a thread to avoid blocking the event loop at import.
_dummy_hash_cache: str | None = None


async def _get_dummy_hash() -> str:
    """Return a valid bcrypt hash for dummy comparison; computed once in thread pool."""
    global _dummy_hash_cache
    if _dummy_hash_cache is None:
        _dummy_hash_cache = await asyncio.to_thread(
            get_password_hash, "not-a-real-password"
        )
    return _dummy_hash_cache


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult (no password)."""
    return UserResult(
        id=u.id,
        name=u.name,
        email=u.email,
        role=u.role.value,
        is_active=u.is_active,
    )


class UserRepository(BaseRepository[User]):
    """User repository. Implements IUserRepository; also authenticate and create_user."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def get_by_id(self, user_id: str) -> UserResult | None:
        user = await self.get_entity(user_id)
        return _user_to_result(user) if user else None

    async def exists(self, user_id: str) -> bool:
        result = await self.db.execute(select(exists().where(User.id == user_id)))
        return bool(result.scalar())

    async def get_by_email(self, email: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.email == email.strip().lower())
        )
        return result.scalar_one_or_none()

    async def authenticate(self, email: str, password: str) -> UserResult | None:
        """Return the user if email/password match an active account, else None."""
        user = await self.get_by_email(email)
        if not user:
            dummy_hash = await _get_dummy_hash()
            await asyncio.to_thread(verify_password, password, dummy_hash)
            return None
        if not user.is_active:
            return None
        if not await asyncio.to_thread(verify_password, password, user.hashed_password):
            return None
        return _user_to_result(user)

    async def create_user(
        self,
        name: str,
        email: str,
        password: str,
        role: UserRole = UserRole.USER,
    ) -> UserResult:
        """Create a user with a hashed password. Email is stored lower-cased."""
        hashed = await asyncio.to_thread(get_password_hash, password)
        user = User(
            name=name,
            email=email.strip().lower(),
            hashed_password=hashed,
            role=role,
            is_active=True,
        )
        await self.create_entity(user)
        return _user_to_result(user)
