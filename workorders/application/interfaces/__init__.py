"""Application ports: repository protocols."""

from workorders.application.interfaces.repositories import (
    IUserRepository,
    IWorkOrderRepository,
)

__all__ = ["IUserRepository", "IWorkOrderRepository"]
