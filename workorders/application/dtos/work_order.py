"""DTOs for work-order use cases (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from workorders.domain.enums import WorkOrderPriority, WorkOrderStatus

PAGE_SIZE = 10


@dataclass(frozen=True)
class UserSummary:
    """Creator/assignee summary attached to a work order at read time."""

    id: str
    name: str
    role: str


@dataclass(frozen=True)
class WorkOrderResult:
    """Work order read-model, enriched with creator and assignee summaries."""

    id: str
    title: str
    description: str
    priority: WorkOrderPriority
    status: WorkOrderStatus
    created_by_id: str
    assigned_to_id: str | None
    created_at: datetime
    updated_at: datetime
    created_by: UserSummary | None = None
    assigned_to: UserSummary | None = None


@dataclass(frozen=True)
class WorkOrderCreate:
    """Validated create payload."""

    title: str
    description: str
    priority: WorkOrderPriority


@dataclass(frozen=True)
class WorkOrderChanges:
    """Validated update payload. None means the field was not provided."""

    title: str | None = None
    description: str | None = None
    priority: WorkOrderPriority | None = None
    status: WorkOrderStatus | None = None
    assigned_to_id: str | None = None


@dataclass(frozen=True)
class WorkOrderFilter:
    """Listing parameters after parsing: page, search text and exact-match filters."""

    page: int = 1
    search: str = ""
    status: WorkOrderStatus | None = None
    priority: WorkOrderPriority | None = None
    page_size: int = PAGE_SIZE

    @property
    def offset(self) -> int:
        """Number of records to skip for this page."""
        return (self.page - 1) * self.page_size


@dataclass(frozen=True)
class WorkOrderPage:
    """One page of a listing plus the total match count (ignoring pagination)."""

    orders: list[WorkOrderResult]
    total: int
    page: int
    page_size: int
