"""Work order repository. Returns application DTOs enriched with user summaries."""

from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from workorders.application.dtos.work_order import (
    UserSummary,
    WorkOrderCreate,
    WorkOrderFilter,
    WorkOrderPage,
    WorkOrderResult,
)
from workorders.domain.enums import WorkOrderStatus
from workorders.domain.exceptions import ResourceNotFoundException
from workorders.infrastructure.persistence.models.user import User
from workorders.infrastructure.persistence.models.work_order import WorkOrder
from workorders.infrastructure.persistence.repositories.base import BaseRepository
from workorders.infrastructure.persistence.repositories.work_order_query import (
    build_work_order_query,
)

_WITH_USERS = (
    selectinload(WorkOrder.created_by),
    selectinload(WorkOrder.assigned_to),
)


def _user_summary(u: User | None) -> UserSummary | None:
    if u is None:
        return None
    return UserSummary(id=u.id, name=u.name, role=u.role.value)


def _to_result(w: WorkOrder) -> WorkOrderResult:
    """Map WorkOrder ORM (with created_by/assigned_to loaded) to WorkOrderResult."""
    return WorkOrderResult(
        id=w.id,
        title=w.title,
        description=w.description,
        priority=w.priority,
        status=w.status,
        created_by_id=w.created_by_id,
        assigned_to_id=w.assigned_to_id,
        created_at=w.created_at,
        updated_at=w.updated_at,
        created_by=_user_summary(w.created_by),
        assigned_to=_user_summary(w.assigned_to),
    )


class WorkOrderRepository(BaseRepository[WorkOrder]):
    """Work order repository. Implements IWorkOrderRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, WorkOrder)

    async def _load(self, order_id: str, *, refresh: bool = False) -> WorkOrder:
        order = await self.get_entity(order_id, *_WITH_USERS, refresh=refresh)
        if order is None:
            raise ResourceNotFoundException("work_order", order_id)
        return order

    async def get_by_id(self, order_id: str) -> WorkOrderResult | None:
        """Return the order with creator/assignee summaries, or None."""
        order = await self.get_entity(order_id, *_WITH_USERS)
        return _to_result(order) if order else None

    async def list_page(
        self, filters: WorkOrderFilter, owner_id: str | None
    ) -> WorkOrderPage:
        """Run the page and count queries for filters (restricted to owner_id if set)."""
        page_query, count_query = build_work_order_query(filters, owner_id)
        rows = await self.db.execute(page_query)
        orders = [_to_result(w) for w in rows.scalars().all()]
        total = (await self.db.execute(count_query)).scalar_one()
        return WorkOrderPage(
            orders=orders,
            total=int(total),
            page=filters.page,
            page_size=filters.page_size,
        )

    async def create(
        self,
        data: WorkOrderCreate,
        created_by_id: str,
        status: str = WorkOrderStatus.OPEN.value,
    ) -> WorkOrderResult:
        """Insert a work order and return it with creator summary."""
        order = WorkOrder(
            title=data.title,
            description=data.description,
            priority=data.priority,
            status=WorkOrderStatus(status),
            created_by_id=created_by_id,
        )
        await self.create_entity(order)
        return _to_result(await self._load(order.id, refresh=True))

    async def update_fields(
        self, order_id: str, changes: dict[str, Any]
    ) -> WorkOrderResult:
        """Write only the given attributes; raise ResourceNotFoundException if missing."""
        order = await self.get_entity(order_id)
        if order is None:
            raise ResourceNotFoundException("work_order", order_id)
        for attr, value in changes.items():
            setattr(order, attr, value)
        await self.db.flush()
        return _to_result(await self._load(order_id, refresh=True))
