"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, repositories, the current actor
and application services. Routes depend only on these; tests swap them via
app.dependency_overrides.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from workorders.application.dtos.user import Actor, UserResult
from workorders.application.use_cases.work_orders import WorkOrderService
from workorders.domain.exceptions import AuthenticationException
from workorders.infrastructure.persistence.database import (
    get_db,
    get_db_transactional,
)
from workorders.infrastructure.persistence.repositories import (
    UserRepository,
    WorkOrderRepository,
)
from workorders.infrastructure.security.jwt import verify_token

_http_bearer = HTTPBearer(auto_error=False)


async def get_user_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRepository:
    """User repository on a read session."""
    return UserRepository(db)


async def get_current_user_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> UserResult | None:
    """Return current user from JWT if present and valid; else None."""
    if not credentials:
        return None
    try:
        claims = verify_token(credentials.credentials)
    except ValueError:
        return None
    user = await user_repo.get_by_id(claims.sub)
    if not user or not user.is_active:
        return None
    return user


async def get_current_user(
    current_user: Annotated[UserResult | None, Depends(get_current_user_optional)],
) -> UserResult:
    """Return current user from JWT; raise 401 if missing or invalid."""
    if current_user is None:
        raise AuthenticationException()
    return current_user


async def get_current_actor(
    current_user: Annotated[UserResult, Depends(get_current_user)],
) -> Actor:
    """Acting identity for work-order operations (role taken from the stored user)."""
    return Actor(id=current_user.id, role=current_user.role)


async def get_work_order_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> WorkOrderService:
    """WorkOrderService on a read session (list, get)."""
    return WorkOrderService(WorkOrderRepository(db), UserRepository(db))


async def get_work_order_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> WorkOrderService:
    """WorkOrderService on a transactional session (create, update)."""
    return WorkOrderService(WorkOrderRepository(db), UserRepository(db))
