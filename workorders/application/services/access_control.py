"""Role-based access rules for work orders.

Ownership: a USER may only read or update orders they created; a MANAGER may
touch any order. Only MANAGER bypasses the ownership rule.

Field masking: an update is reduced to the fields the actor's role may write.
USER may change title, description and priority; MANAGER may also change
status and assignee. Any other role gets an empty mutation set (no-op update).
Empty values ("" or None) are treated as not provided.
"""

from __future__ import annotations

from typing import Any

from workorders.application.dtos.user import Actor
from workorders.application.dtos.work_order import WorkOrderChanges
from workorders.domain.enums import UserRole
from workorders.domain.exceptions import AuthorizationException

USER_WRITABLE_FIELDS: tuple[str, ...] = ("title", "description", "priority")
MANAGER_WRITABLE_FIELDS: tuple[str, ...] = USER_WRITABLE_FIELDS + (
    "status",
    "assigned_to_id",
)

_WRITABLE_FIELDS_BY_ROLE: dict[str, tuple[str, ...]] = {
    UserRole.USER.value: USER_WRITABLE_FIELDS,
    UserRole.MANAGER.value: MANAGER_WRITABLE_FIELDS,
}


def is_manager(actor: Actor) -> bool:
    """Return True if the actor has the MANAGER role."""
    return actor.role == UserRole.MANAGER.value


def owner_scope(actor: Actor) -> str | None:
    """Return the creator id a listing must be restricted to, or None for managers."""
    return None if is_manager(actor) else actor.id


def ensure_can_access(actor: Actor, owner_id: str, action: str = "read") -> None:
    """Raise AuthorizationException if actor may not access an order owned by owner_id."""
    if is_manager(actor):
        return
    if actor.id != owner_id:
        raise AuthorizationException(resource="work_order", action=action)


def writable_fields(role: str) -> tuple[str, ...]:
    """Return the update fields the given role may write (empty for unknown roles)."""
    return _WRITABLE_FIELDS_BY_ROLE.get(role, ())


def mask_update(actor: Actor, changes: WorkOrderChanges) -> dict[str, Any]:
    """Reduce validated changes to the mutation set the actor is allowed to apply.

    Returns:
        Mapping of model attribute name to new value. Empty when nothing
        permitted (or nothing non-empty) was provided.
    """
    mutation: dict[str, Any] = {}
    for field in writable_fields(actor.role):
        value = getattr(changes, field)
        if value:
            mutation[field] = value
    return mutation
