"""Column mixins shared by the ORM models.

CuidMixin gives a CUID2 string primary key generated client-side;
TimestampMixin gives server-filled created_at/updated_at (timezone-aware).
"""

from datetime import datetime

from cuid2 import cuid_wrapper
from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

_generate_cuid = cuid_wrapper()


class CuidMixin:
    id: Mapped[str] = mapped_column(String, primary_key=True, default=_generate_cuid)


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class BaseModelMixin(CuidMixin, TimestampMixin):
    """CUID primary key plus timestamps; every table in this service uses it."""
