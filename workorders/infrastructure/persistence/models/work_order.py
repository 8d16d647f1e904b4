"""WorkOrder ORM model. Created by a user, optionally assigned to a user."""

from sqlalchemy import Enum, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from workorders.domain.enums import WorkOrderPriority, WorkOrderStatus
from workorders.infrastructure.persistence.database import Base
from workorders.infrastructure.persistence.models.mixins import BaseModelMixin
from workorders.infrastructure.persistence.models.user import User


class WorkOrder(BaseModelMixin, Base):
    """Work order record. Table: work_order."""

    __tablename__ = "work_order"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    priority: Mapped[WorkOrderPriority] = mapped_column(
        Enum(WorkOrderPriority, name="work_order_priority"), nullable=False
    )
    status: Mapped[WorkOrderStatus] = mapped_column(
        Enum(WorkOrderStatus, name="work_order_status"),
        nullable=False,
        default=WorkOrderStatus.OPEN,
        server_default=WorkOrderStatus.OPEN.value,
    )
    created_by_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    assigned_to_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="SET NULL"), nullable=True, index=True
    )

    created_by: Mapped[User] = relationship(foreign_keys=[created_by_id], lazy="raise")
    assigned_to: Mapped[User | None] = relationship(
        foreign_keys=[assigned_to_id], lazy="raise"
    )

    __table_args__ = (
        Index("ix_work_order_created_at", "created_at"),
        Index("ix_work_order_status_priority", "status", "priority"),
    )
