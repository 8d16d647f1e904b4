"""Application DTOs (no ORM dependency)."""

from workorders.application.dtos.user import Actor, UserResult
from workorders.application.dtos.work_order import (
    PAGE_SIZE,
    UserSummary,
    WorkOrderChanges,
    WorkOrderCreate,
    WorkOrderFilter,
    WorkOrderPage,
    WorkOrderResult,
)

__all__ = [
    "PAGE_SIZE",
    "Actor",
    "UserResult",
    "UserSummary",
    "WorkOrderChanges",
    "WorkOrderCreate",
    "WorkOrderFilter",
    "WorkOrderPage",
    "WorkOrderResult",
]
