"""Work order operations: list, get, create, update.

Each operation receives the acting identity explicitly; repositories are
injected at construction. Authentication happens before these are called.
"""

from __future__ import annotations

from typing import Any

from workorders.application.dtos.user import Actor
from workorders.application.dtos.work_order import (
    PAGE_SIZE,
    WorkOrderFilter,
    WorkOrderPage,
    WorkOrderResult,
)
from workorders.application.interfaces.repositories import (
    IUserRepository,
    IWorkOrderRepository,
)
from workorders.application.services.access_control import (
    ensure_can_access,
    mask_update,
    owner_scope,
)
from workorders.application.services.work_order_validator import (
    validate_create,
    validate_update,
)
from workorders.domain.enums import WorkOrderPriority, WorkOrderStatus
from workorders.domain.exceptions import (
    AuthorizationException,
    ResourceNotFoundException,
    ValidationException,
)
from workorders.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

# OFFSET is a signed 64-bit integer in PostgreSQL.
MAX_OFFSET = 2**63 - 1
MAX_PAGE = MAX_OFFSET // PAGE_SIZE + 1


def parse_page(raw: Any) -> int:
    """Return a page number >= 1. Missing or non-numeric input means page 1."""
    try:
        page = int(raw)
    except (TypeError, ValueError):
        return 1
    return max(1, page)


def build_work_order_filter(
    page: Any = None,
    search: str | None = None,
    status: str | None = None,
    priority: str | None = None,
) -> WorkOrderFilter:
    """Parse raw listing parameters into a WorkOrderFilter.

    Empty status/priority mean "any". Unknown enum values, and a page whose
    offset would not fit in a bigint, raise ValidationException rather than
    silently matching nothing. The search text is kept as given.
    """
    errors: list[dict[str, str]] = []
    page_value = parse_page(page)
    if page_value > MAX_PAGE:
        errors.append({"field": "page", "message": f"Must be at most {MAX_PAGE}"})
    status_value: WorkOrderStatus | None = None
    priority_value: WorkOrderPriority | None = None
    if status:
        try:
            status_value = WorkOrderStatus(status)
        except ValueError:
            errors.append(
                {
                    "field": "status",
                    "message": f"Must be one of {WorkOrderStatus.values()}",
                }
            )
    if priority:
        try:
            priority_value = WorkOrderPriority(priority)
        except ValueError:
            errors.append(
                {
                    "field": "priority",
                    "message": f"Must be one of {WorkOrderPriority.values()}",
                }
            )
    if errors:
        raise ValidationException("Invalid listing filter", errors=errors)
    return WorkOrderFilter(
        page=page_value,
        search=search or "",
        status=status_value,
        priority=priority_value,
    )


class WorkOrderService:
    """Create, read, list and update work orders under role-based access rules."""

    def __init__(
        self,
        work_order_repo: IWorkOrderRepository,
        user_repo: IUserRepository | None = None,
    ) -> None:
        self.work_order_repo = work_order_repo
        self.user_repo = user_repo

    async def list_work_orders(
        self, actor: Actor, filters: WorkOrderFilter
    ) -> WorkOrderPage:
        """Return one page of orders visible to the actor (USER: own orders only)."""
        return await self.work_order_repo.list_page(filters, owner_scope(actor))

    async def _get_accessible(
        self, actor: Actor, order_id: str, action: str
    ) -> WorkOrderResult:
        order = await self.work_order_repo.get_by_id(order_id)
        if order is None:
            raise ResourceNotFoundException("work_order", order_id)
        try:
            ensure_can_access(actor, order.created_by_id, action)
        except AuthorizationException:
            logger.warning(
                "Denied %s on work_order %s for user %s (role=%s)",
                action,
                order_id,
                actor.id,
                actor.role,
            )
            raise
        return order

    async def get_work_order(self, actor: Actor, order_id: str) -> WorkOrderResult:
        """Return the order; 404 if absent, 403 if a USER does not own it."""
        return await self._get_accessible(actor, order_id, "read")

    async def create_work_order(self, actor: Actor, payload: Any) -> WorkOrderResult:
        """Validate and create an order owned by the actor with status OPEN."""
        data = validate_create(payload)
        created = await self.work_order_repo.create(
            data,
            created_by_id=actor.id,
            status=WorkOrderStatus.OPEN.value,
        )
        logger.info("Created work_order %s by user %s", created.id, actor.id)
        return created

    async def update_work_order(
        self, actor: Actor, order_id: str, payload: Any
    ) -> WorkOrderResult:
        """Apply the role-permitted subset of a partial update.

        Order of checks: existence (404), ownership (403), validation (400).
        Fields the role may not write are dropped silently.
        """
        current = await self._get_accessible(actor, order_id, "update")
        changes = validate_update(payload)
        mutation = mask_update(actor, changes)
        if not mutation:
            logger.debug(
                "No permitted changes for work_order %s by user %s", order_id, actor.id
            )
            return current
        assignee_id = mutation.get("assigned_to_id")
        if assignee_id and self.user_repo is not None:
            if not await self.user_repo.exists(assignee_id):
                raise ValidationException(
                    f"Assignee not found: {assignee_id}", field="assignedToId"
                )
        updated = await self.work_order_repo.update_fields(order_id, mutation)
        logger.info(
            "Updated work_order %s by user %s: fields=%s",
            order_id,
            actor.id,
            sorted(mutation),
        )
        return updated
