"""Integration tests for WorkOrderRepository and UserRepository (requires Postgres).

Each test runs in a session that is rolled back afterwards.
"""

import uuid
from datetime import UTC, datetime, timedelta

import pytest

from workorders.application.dtos.work_order import WorkOrderCreate, WorkOrderFilter
from workorders.domain.enums import UserRole, WorkOrderPriority, WorkOrderStatus
from workorders.domain.exceptions import ResourceNotFoundException
from workorders.infrastructure.persistence.models import WorkOrder
from workorders.infrastructure.persistence.repositories import (
    UserRepository,
    WorkOrderRepository,
)

pytestmark = pytest.mark.requires_db


async def _create_user(db_session, role: UserRole = UserRole.USER):
    email = f"user-{uuid.uuid4().hex[:10]}@example.com"
    return await UserRepository(db_session).create_user(
        name="Test User", email=email, password="password123", role=role
    )


async def _seed_orders(db_session, owner_id: str, count: int) -> list[WorkOrder]:
    """Insert count orders with strictly increasing created_at (index 0 is oldest)."""
    start = datetime(2025, 1, 1, tzinfo=UTC)
    orders = [
        WorkOrder(
            title=f"Order {i:02d}",
            description=f"Description for order {i:02d}",
            priority=WorkOrderPriority.MED,
            status=WorkOrderStatus.OPEN,
            created_by_id=owner_id,
            created_at=start + timedelta(minutes=i),
        )
        for i in range(count)
    ]
    db_session.add_all(orders)
    await db_session.flush()
    return orders


async def test_create_then_get_round_trip(db_session) -> None:
    user = await _create_user(db_session)
    repo = WorkOrderRepository(db_session)
    created = await repo.create(
        WorkOrderCreate(
            title="Fix pump", description="Pump leaking", priority=WorkOrderPriority.HIGH
        ),
        created_by_id=user.id,
        status="OPEN",
    )
    assert created.status == WorkOrderStatus.OPEN
    assert created.created_by_id == user.id
    assert created.created_by is not None and created.created_by.name == "Test User"
    assert created.assigned_to is None

    fetched = await repo.get_by_id(created.id)
    assert fetched == created


async def test_pagination_newest_first(db_session) -> None:
    """25 orders: page 1 has 10, page 3 has 5, total is 25 on every page."""
    user = await _create_user(db_session)
    await _seed_orders(db_session, user.id, 25)
    repo = WorkOrderRepository(db_session)

    first = await repo.list_page(WorkOrderFilter(page=1), owner_id=user.id)
    third = await repo.list_page(WorkOrderFilter(page=3), owner_id=user.id)
    beyond = await repo.list_page(WorkOrderFilter(page=4), owner_id=user.id)

    assert first.total == third.total == beyond.total == 25
    assert len(first.orders) == 10
    assert len(third.orders) == 5
    assert beyond.orders == []
    assert first.orders[0].title == "Order 24"
    assert third.orders[-1].title == "Order 00"


async def test_filters_compose_with_owner_scope(db_session) -> None:
    owner = await _create_user(db_session)
    other = await _create_user(db_session)
    repo = WorkOrderRepository(db_session)
    matching = WorkOrderCreate(
        title="Broken PUMP seal", description="Leaks overnight", priority=WorkOrderPriority.HIGH
    )
    await repo.create(matching, created_by_id=owner.id, status="OPEN")
    await repo.create(matching, created_by_id=other.id, status="OPEN")
    await repo.create(
        WorkOrderCreate(
            title="Replace bulb", description="Pump room light", priority=WorkOrderPriority.LOW
        ),
        created_by_id=owner.id,
        status="OPEN",
    )

    by_search = await repo.list_page(WorkOrderFilter(search="pump"), owner_id=owner.id)
    assert by_search.total == 2

    by_search_and_priority = await repo.list_page(
        WorkOrderFilter(search="pump", priority=WorkOrderPriority.HIGH),
        owner_id=owner.id,
    )
    assert by_search_and_priority.total == 1
    assert by_search_and_priority.orders[0].created_by_id == owner.id

    literal_wildcard = await repo.list_page(
        WorkOrderFilter(search="%"), owner_id=owner.id
    )
    assert literal_wildcard.total == 0


async def test_description_search_composes_with_status_filter(db_session) -> None:
    """Search text found only in descriptions, ANDed with a status filter."""
    owner = await _create_user(db_session)
    repo = WorkOrderRepository(db_session)
    open_match = await repo.create(
        WorkOrderCreate(
            title="Replace bulb", description="Boiler room light", priority=WorkOrderPriority.LOW
        ),
        created_by_id=owner.id,
        status="OPEN",
    )
    closed_match = await repo.create(
        WorkOrderCreate(
            title="Paint wall", description="Next to the boiler", priority=WorkOrderPriority.MED
        ),
        created_by_id=owner.id,
        status="OPEN",
    )
    await repo.update_fields(closed_match.id, {"status": WorkOrderStatus.CLOSED})
    await repo.create(
        WorkOrderCreate(
            title="Oil hinge", description="Squeaky door", priority=WorkOrderPriority.LOW
        ),
        created_by_id=owner.id,
        status="OPEN",
    )

    by_search = await repo.list_page(WorkOrderFilter(search="boiler"), owner_id=owner.id)
    assert {o.id for o in by_search.orders} == {open_match.id, closed_match.id}

    closed_only = await repo.list_page(
        WorkOrderFilter(search="boiler", status=WorkOrderStatus.CLOSED), owner_id=None
    )
    assert [o.id for o in closed_only.orders if o.created_by_id == owner.id] == [
        closed_match.id
    ]

    open_only = await repo.list_page(
        WorkOrderFilter(search="boiler", status=WorkOrderStatus.OPEN), owner_id=owner.id
    )
    assert open_only.total == 1
    assert [o.id for o in open_only.orders] == [open_match.id]


async def test_update_fields_and_assignee_summary(db_session) -> None:
    owner = await _create_user(db_session)
    manager = await _create_user(db_session, UserRole.MANAGER)
    repo = WorkOrderRepository(db_session)
    created = await repo.create(
        WorkOrderCreate(title="Fix pump", description="Pump leaking", priority=WorkOrderPriority.HIGH),
        created_by_id=owner.id,
        status="OPEN",
    )
    updated = await repo.update_fields(
        created.id, {"status": WorkOrderStatus.CLOSED, "assigned_to_id": manager.id}
    )
    assert updated.status == WorkOrderStatus.CLOSED
    assert updated.title == "Fix pump"
    assert updated.assigned_to is not None
    assert updated.assigned_to.role == "MANAGER"


async def test_update_missing_order_raises(db_session) -> None:
    with pytest.raises(ResourceNotFoundException):
        await WorkOrderRepository(db_session).update_fields("missing", {"title": "x"})


async def test_user_exists_and_authenticate(db_session) -> None:
    user = await _create_user(db_session)
    repo = UserRepository(db_session)
    assert await repo.exists(user.id)
    assert not await repo.exists("missing-user")
    assert (await repo.authenticate(user.email, "password123")) == user
    assert await repo.authenticate(user.email, "wrong-password") is None
