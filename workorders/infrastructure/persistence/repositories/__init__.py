"""Repositories: SQLAlchemy implementations of the application ports."""

from workorders.infrastructure.persistence.repositories.base import BaseRepository
from workorders.infrastructure.persistence.repositories.user_repo import UserRepository
from workorders.infrastructure.persistence.repositories.work_order_query import (
    build_work_order_query,
)
from workorders.infrastructure.persistence.repositories.work_order_repo import (
    WorkOrderRepository,
)

__all__ = [
    "BaseRepository",
    "UserRepository",
    "WorkOrderRepository",
    "build_work_order_query",
]
