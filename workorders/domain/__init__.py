"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from workorders.domain.enums import UserRole, WorkOrderPriority, WorkOrderStatus
from workorders.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    DatabaseNotConfiguredException,
    ResourceNotFoundException,
    ValidationException,
    WorkOrderException,
)

__all__ = [
    # Enums
    "UserRole",
    "WorkOrderPriority",
    "WorkOrderStatus",
    # Exceptions
    "AuthenticationException",
    "AuthorizationException",
    "DatabaseNotConfiguredException",
    "ResourceNotFoundException",
    "ValidationException",
    "WorkOrderException",
]
