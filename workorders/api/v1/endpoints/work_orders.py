"""Work order API: thin routes delegating to WorkOrderService.

All routes require a bearer token. Bodies are taken as raw JSON so that
validation failures come back as 400 with field-level errors.
"""

from dataclasses import asdict
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Query, Request

from workorders.api.v1.dependencies import (
    get_current_actor,
    get_work_order_service,
    get_work_order_service_for_write,
)
from workorders.application.dtos.user import Actor
from workorders.application.dtos.work_order import WorkOrderResult
from workorders.application.use_cases.work_orders import (
    WorkOrderService,
    build_work_order_filter,
)
from workorders.core.limiter import limit_writes
from workorders.schemas.work_order import WorkOrderListResponse, WorkOrderResponse

router = APIRouter()


def _to_response(order: WorkOrderResult) -> WorkOrderResponse:
    return WorkOrderResponse.model_validate(asdict(order))


@router.get("", response_model=WorkOrderListResponse)
async def list_work_orders(
    actor: Annotated[Actor, Depends(get_current_actor)],
    svc: Annotated[WorkOrderService, Depends(get_work_order_service)],
    page: Annotated[str | None, Query(description="Page number (invalid or < 1 means 1)")] = None,
    search: Annotated[str, Query(description="Case-insensitive text in title or description")] = "",
    status: Annotated[str, Query(description="OPEN, IN_PROGRESS or CLOSED")] = "",
    priority: Annotated[str, Query(description="LOW, MED or HIGH")] = "",
):
    """List work orders, newest first, 10 per page. Users only see their own."""
    filters = build_work_order_filter(
        page=page, search=search, status=status, priority=priority
    )
    result = await svc.list_work_orders(actor, filters)
    return WorkOrderListResponse(
        orders=[_to_response(o) for o in result.orders],
        total=result.total,
        page=result.page,
        page_size=result.page_size,
    )


@router.post("", response_model=WorkOrderResponse, status_code=201)
@limit_writes
async def create_work_order(
    request: Request,
    actor: Annotated[Actor, Depends(get_current_actor)],
    svc: Annotated[WorkOrderService, Depends(get_work_order_service_for_write)],
    body: Annotated[Any, Body(examples=[{"title": "Fix pump", "description": "Pump leaking", "priority": "HIGH"}])] = None,
):
    """Create a work order owned by the caller; status starts OPEN."""
    created = await svc.create_work_order(actor, body)
    return _to_response(created)


@router.get("/{order_id}", response_model=WorkOrderResponse)
async def get_work_order(
    order_id: str,
    actor: Annotated[Actor, Depends(get_current_actor)],
    svc: Annotated[WorkOrderService, Depends(get_work_order_service)],
):
    """Get a work order (404 if missing, 403 if a user does not own it)."""
    return _to_response(await svc.get_work_order(actor, order_id))


@router.patch("/{order_id}", response_model=WorkOrderResponse)
@limit_writes
async def update_work_order(
    request: Request,
    order_id: str,
    actor: Annotated[Actor, Depends(get_current_actor)],
    svc: Annotated[WorkOrderService, Depends(get_work_order_service_for_write)],
    body: Annotated[Any, Body(examples=[{"status": "CLOSED", "assignedToId": "user-id"}])] = None,
):
    """Partially update a work order.

    Users may change title, description and priority of their own orders;
    managers may also change status and assignedToId on any order. Fields the
    caller may not change are ignored.
    """
    updated = await svc.update_work_order(actor, order_id, body)
    return _to_response(updated)
