"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from workorders.application.dtos.user import UserResult
    from workorders.application.dtos.work_order import (
        WorkOrderCreate,
        WorkOrderFilter,
        WorkOrderPage,
        WorkOrderResult,
    )


class IWorkOrderRepository(Protocol):
    """Protocol for work-order repository (DIP)."""

    async def get_by_id(self, order_id: str) -> WorkOrderResult | None:
        """Return the work order with creator/assignee summaries, or None."""

    async def list_page(
        self, filters: WorkOrderFilter, owner_id: str | None
    ) -> WorkOrderPage:
        """Return one page of matching orders and the total count.

        When owner_id is set, only orders created by that user are considered.
        """

    async def create(
        self, data: WorkOrderCreate, created_by_id: str, status: str
    ) -> WorkOrderResult:
        """Insert a work order and return it."""

    async def update_fields(
        self, order_id: str, changes: dict[str, Any]
    ) -> WorkOrderResult:
        """Write only the given fields and return the enriched record."""


class IUserRepository(Protocol):
    """Protocol for user repository (DIP)."""

    async def get_by_id(self, user_id: str) -> UserResult | None:
        """Return user by ID."""

    async def exists(self, user_id: str) -> bool:
        """Return True if a user with this ID exists."""
