"""Persistence models: ORM entities and mixins."""

from workorders.infrastructure.persistence.models.mixins import (
    BaseModelMixin,
    CuidMixin,
    TimestampMixin,
)
from workorders.infrastructure.persistence.models.user import User
from workorders.infrastructure.persistence.models.work_order import WorkOrder

__all__ = [
    "BaseModelMixin",
    "CuidMixin",
    "TimestampMixin",
    "User",
    "WorkOrder",
]
