"""Work order API response schemas (camelCase JSON).

Request bodies are validated by the application-layer validator so that
violations come back as 400 with field-level errors.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from workorders.domain.enums import WorkOrderPriority, WorkOrderStatus


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class UserSummaryResponse(_CamelModel):
    """Creator or assignee summary embedded in a work order."""

    id: str
    name: str
    role: str


class WorkOrderResponse(_CamelModel):
    """Work order with creator/assignee summaries."""

    id: str
    title: str
    description: str
    priority: WorkOrderPriority
    status: WorkOrderStatus
    created_by_id: str
    assigned_to_id: str | None = None
    created_at: datetime
    updated_at: datetime
    created_by: UserSummaryResponse | None = None
    assigned_to: UserSummaryResponse | None = None


class WorkOrderListResponse(_CamelModel):
    """One page of work orders: {orders, total, page, pageSize}."""

    orders: list[WorkOrderResponse]
    total: int
    page: int
    page_size: int
