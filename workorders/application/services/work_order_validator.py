"""Work-order payload validation.

Turns an untrusted JSON body into a typed create/update payload or raises
ValidationException with one {"field", "message"} entry per violation.
Unknown keys are ignored. Pure: no I/O, no side effects.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from workorders.application.dtos.work_order import WorkOrderChanges, WorkOrderCreate
from workorders.domain.enums import WorkOrderPriority, WorkOrderStatus
from workorders.domain.exceptions import ValidationException

TITLE_MIN_LENGTH = 3
DESCRIPTION_MIN_LENGTH = 5

ValidationMode = Literal["create", "update"]


class _CreatePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., min_length=TITLE_MIN_LENGTH)
    description: str = Field(..., min_length=DESCRIPTION_MIN_LENGTH)
    priority: WorkOrderPriority


class _UpdatePayload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: str | None = Field(default=None, min_length=TITLE_MIN_LENGTH)
    description: str | None = Field(default=None, min_length=DESCRIPTION_MIN_LENGTH)
    priority: WorkOrderPriority | None = None
    status: WorkOrderStatus | None = None
    assigned_to_id: str | None = Field(default=None, alias="assignedToId")

    @field_validator("title", "description", "priority", "status", mode="before")
    @classmethod
    def reject_explicit_null(cls, v: Any) -> Any:
        # Omitted keys keep the default; only a literal null reaches here.
        if v is None:
            raise ValueError("must not be null")
        return v


def _field_errors(exc: ValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors to [{"field", "message"}] (field = top-level JSON key)."""
    errors: list[dict[str, str]] = []
    for err in exc.errors():
        loc = err.get("loc") or ()
        field = str(loc[0]) if loc else "body"
        errors.append({"field": field, "message": err.get("msg", "Invalid value")})
    return errors


def validate_work_order_payload(
    payload: Any, mode: ValidationMode
) -> WorkOrderCreate | WorkOrderChanges:
    """Validate a create or update body.

    Args:
        payload: Decoded JSON body (expected to be an object).
        mode: "create" (title, description, priority required) or "update"
            (all optional, plus status and assignedToId). An explicit null is
            rejected for every field except assignedToId.

    Returns:
        WorkOrderCreate for create mode, WorkOrderChanges for update mode.

    Raises:
        ValidationException: If the body is not an object or any present field
            violates its constraint. details["errors"] lists every violation.
    """
    if not isinstance(payload, dict):
        raise ValidationException(
            "Request body must be a JSON object",
            errors=[{"field": "body", "message": "Expected a JSON object"}],
        )
    try:
        if mode == "create":
            created = _CreatePayload.model_validate(payload)
            return WorkOrderCreate(
                title=created.title,
                description=created.description,
                priority=created.priority,
            )
        changes = _UpdatePayload.model_validate(payload)
    except ValidationError as e:
        raise ValidationException(
            "Work order validation failed", errors=_field_errors(e)
        ) from e
    return WorkOrderChanges(
        title=changes.title,
        description=changes.description,
        priority=changes.priority,
        status=changes.status,
        assigned_to_id=changes.assigned_to_id,
    )


def validate_create(payload: Any) -> WorkOrderCreate:
    """Validate a create body (title, description, priority required)."""
    result = validate_work_order_payload(payload, "create")
    assert isinstance(result, WorkOrderCreate)
    return result


def validate_update(payload: Any) -> WorkOrderChanges:
    """Validate an update body (every field optional)."""
    result = validate_work_order_payload(payload, "update")
    assert isinstance(result, WorkOrderChanges)
    return result
