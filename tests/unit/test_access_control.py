"""Unit tests for ownership checks and role-based field masking."""

import pytest

from workorders.application.dtos.user import Actor
from workorders.application.dtos.work_order import WorkOrderChanges
from workorders.application.services.access_control import (
    MANAGER_WRITABLE_FIELDS,
    USER_WRITABLE_FIELDS,
    ensure_can_access,
    mask_update,
    owner_scope,
    writable_fields,
)
from workorders.domain.enums import WorkOrderPriority, WorkOrderStatus
from workorders.domain.exceptions import AuthorizationException

_FULL_CHANGES = WorkOrderChanges(
    title="New title",
    description="New description",
    priority=WorkOrderPriority.LOW,
    status=WorkOrderStatus.CLOSED,
    assigned_to_id="user-9",
)


class TestOwnership:
    def test_owner_may_access(self) -> None:
        ensure_can_access(Actor(id="u1", role="USER"), "u1")

    def test_non_owner_user_denied(self) -> None:
        with pytest.raises(AuthorizationException) as exc_info:
            ensure_can_access(Actor(id="u2", role="USER"), "u1", "update")
        assert exc_info.value.details == {"resource": "work_order", "action": "update"}

    def test_manager_may_access_any(self) -> None:
        ensure_can_access(Actor(id="m1", role="MANAGER"), "u1")

    def test_unknown_role_does_not_bypass_ownership(self) -> None:
        with pytest.raises(AuthorizationException):
            ensure_can_access(Actor(id="x", role="ADMIN"), "u1")

    def test_owner_scope(self) -> None:
        assert owner_scope(Actor(id="u1", role="USER")) == "u1"
        assert owner_scope(Actor(id="m1", role="MANAGER")) is None


class TestMaskUpdate:
    def test_user_keeps_only_basic_fields(self) -> None:
        mutation = mask_update(Actor(id="u1", role="USER"), _FULL_CHANGES)
        assert mutation == {
            "title": "New title",
            "description": "New description",
            "priority": WorkOrderPriority.LOW,
        }

    def test_user_status_only_is_empty(self) -> None:
        changes = WorkOrderChanges(status=WorkOrderStatus.CLOSED)
        assert mask_update(Actor(id="u1", role="USER"), changes) == {}

    def test_manager_keeps_all_fields(self) -> None:
        mutation = mask_update(Actor(id="m1", role="MANAGER"), _FULL_CHANGES)
        assert set(mutation) == set(MANAGER_WRITABLE_FIELDS)
        assert mutation["assigned_to_id"] == "user-9"

    def test_unknown_role_gets_empty_mutation(self) -> None:
        assert mask_update(Actor(id="x", role="AUDITOR"), _FULL_CHANGES) == {}

    def test_falsy_values_excluded(self) -> None:
        changes = WorkOrderChanges(title="Kept", assigned_to_id="")
        mutation = mask_update(Actor(id="m1", role="MANAGER"), changes)
        assert mutation == {"title": "Kept"}

    def test_writable_fields_by_role(self) -> None:
        assert writable_fields("USER") == USER_WRITABLE_FIELDS
        assert writable_fields("MANAGER") == MANAGER_WRITABLE_FIELDS
        assert writable_fields("") == ()
