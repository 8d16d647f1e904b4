"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories).
"""

from workorders.application.interfaces import IUserRepository, IWorkOrderRepository
from workorders.application.use_cases.work_orders import WorkOrderService

__all__ = [
    "IUserRepository",
    "IWorkOrderRepository",
    "WorkOrderService",
]
