"""Listing query construction for work orders.

build_work_order_query turns a WorkOrderFilter plus an optional owner
restriction into a page SELECT and its matching COUNT SELECT. Both share
the same WHERE clause, so total always matches the filtered set.
"""

from __future__ import annotations

from sqlalchemy import ColumnElement, Select, and_, func, or_, select, true
from sqlalchemy.orm import selectinload

from workorders.application.dtos.work_order import WorkOrderFilter
from workorders.infrastructure.persistence.models.work_order import WorkOrder

LIKE_ESCAPE = "\\"


def escape_like(text: str) -> str:
    """Escape LIKE wildcards (%, _) and the escape char so text matches literally."""
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def work_order_conditions(
    filters: WorkOrderFilter, owner_id: str | None = None
) -> list[ColumnElement[bool]]:
    """Return the WHERE conditions for a listing (combined with AND by the caller).

    The owner restriction is appended last and independently of the search,
    status and priority filters.
    """
    conditions: list[ColumnElement[bool]] = []
    if filters.search:
        pattern = f"%{escape_like(filters.search)}%"
        conditions.append(
            or_(
                WorkOrder.title.ilike(pattern, escape=LIKE_ESCAPE),
                WorkOrder.description.ilike(pattern, escape=LIKE_ESCAPE),
            )
        )
    if filters.status is not None:
        conditions.append(WorkOrder.status == filters.status)
    if filters.priority is not None:
        conditions.append(WorkOrder.priority == filters.priority)
    if owner_id is not None:
        conditions.append(WorkOrder.created_by_id == owner_id)
    return conditions


def build_work_order_query(
    filters: WorkOrderFilter, owner_id: str | None = None
) -> tuple[Select, Select]:
    """Return (page query, count query) for the given filters.

    Page query: newest first (created_at DESC, id DESC as tiebreaker), offset
    (page - 1) * page_size, limit page_size, creator and assignee eager-loaded.
    Count query: number of matching rows ignoring pagination.
    """
    where = and_(true(), *work_order_conditions(filters, owner_id))
    page_query = (
        select(WorkOrder)
        .where(where)
        .options(
            selectinload(WorkOrder.created_by),
            selectinload(WorkOrder.assigned_to),
        )
        .order_by(WorkOrder.created_at.desc(), WorkOrder.id.desc())
        .offset(filters.offset)
        .limit(filters.page_size)
    )
    count_query = select(func.count(WorkOrder.id)).where(where)
    return page_query, count_query
