"""Application services: payload validation and access control."""

from workorders.application.services.access_control import (
    ensure_can_access,
    is_manager,
    mask_update,
    owner_scope,
    writable_fields,
)
from workorders.application.services.work_order_validator import (
    validate_create,
    validate_update,
    validate_work_order_payload,
)

__all__ = [
    "ensure_can_access",
    "is_manager",
    "mask_update",
    "owner_scope",
    "validate_create",
    "validate_update",
    "validate_work_order_payload",
    "writable_fields",
]
