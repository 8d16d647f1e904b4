"""Domain enumerations for the work-order service.

Enums represent fixed sets of domain values (roles, priorities, statuses).
Values are the upper-case strings used on the wire and in storage.
"""

from enum import Enum


class UserRole(str, Enum):
    """Role of an authenticated user.

    USER is restricted to their own work orders; MANAGER is unrestricted.
    """

    USER = "USER"
    MANAGER = "MANAGER"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid role values as strings."""
        return [role.value for role in cls]


class WorkOrderPriority(str, Enum):
    """Work order priority."""

    LOW = "LOW"
    MED = "MED"
    HIGH = "HIGH"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid priority values as strings."""
        return [priority.value for priority in cls]


class WorkOrderStatus(str, Enum):
    """Work order lifecycle status. New orders always start OPEN."""

    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    CLOSED = "CLOSED"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings."""
        return [status.value for status in cls]
