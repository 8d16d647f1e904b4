"""Pytest configuration and fixtures for workorders.

Uses workorders.main:app for HTTP tests and
workorders.infrastructure.persistence.database for DB-dependent fixtures.
Environment defaults are set before the app is imported so that Settings
validation (SECRET_KEY) passes without a .env file.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-workorders-tests")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from datetime import UTC, datetime  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from workorders.application.dtos.user import Actor  # noqa: E402
from workorders.application.dtos.work_order import (  # noqa: E402
    UserSummary,
    WorkOrderResult,
)
from workorders.domain.enums import WorkOrderPriority, WorkOrderStatus  # noqa: E402
from workorders.infrastructure.persistence import database  # noqa: E402
from workorders.main import app  # noqa: E402


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI). Clears dependency overrides after."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository/integration tests. Rolls back after test.

    Requires DATABASE_URL (postgresql+asyncpg) with migrations applied.
    Skips when no database is configured. Use @pytest.mark.requires_db to
    mark tests that need this fixture; run without DB via:
    pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, then run: alembic upgrade head"
        )
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()


@pytest.fixture
def user_actor() -> Actor:
    return Actor(id="user-1", role="USER")


@pytest.fixture
def other_user_actor() -> Actor:
    return Actor(id="user-2", role="USER")


@pytest.fixture
def manager_actor() -> Actor:
    return Actor(id="manager-1", role="MANAGER")


def _make_work_order(
    order_id: str = "wo-1",
    created_by_id: str = "user-1",
    title: str = "Fix pump",
    description: str = "Pump in building B is leaking",
    priority: WorkOrderPriority = WorkOrderPriority.HIGH,
    status: WorkOrderStatus = WorkOrderStatus.OPEN,
    assigned_to_id: str | None = None,
) -> WorkOrderResult:
    """Build a WorkOrderResult with creator summary (and assignee summary when set)."""
    stamp = datetime(2025, 1, 15, 12, 0, 0, tzinfo=UTC)
    return WorkOrderResult(
        id=order_id,
        title=title,
        description=description,
        priority=priority,
        status=status,
        created_by_id=created_by_id,
        assigned_to_id=assigned_to_id,
        created_at=stamp,
        updated_at=stamp,
        created_by=UserSummary(id=created_by_id, name="Creator", role="USER"),
        assigned_to=(
            UserSummary(id=assigned_to_id, name="Assignee", role="USER")
            if assigned_to_id
            else None
        ),
    )


@pytest.fixture
def make_order():
    """Factory for WorkOrderResult read-models (see _make_work_order for defaults)."""
    return _make_work_order
