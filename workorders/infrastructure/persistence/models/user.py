"""User ORM model for authentication and work-order ownership."""

from sqlalchemy import Boolean, Enum, String, text
from sqlalchemy.orm import Mapped, mapped_column

from workorders.domain.enums import UserRole
from workorders.infrastructure.persistence.database import Base
from workorders.infrastructure.persistence.models.mixins import BaseModelMixin


class User(BaseModelMixin, Base):
    """User model. Table: app_user. Email is unique."""

    __tablename__ = "app_user"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    hashed_password: Mapped[str] = mapped_column(String, nullable=False)
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, name="user_role"),
        nullable=False,
        default=UserRole.USER,
        server_default=UserRole.USER.value,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("true")
    )
