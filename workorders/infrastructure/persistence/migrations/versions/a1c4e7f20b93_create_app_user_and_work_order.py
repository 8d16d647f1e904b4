"""create app_user and work_order tables

Revision ID: a1c4e7f20b93
Revises:
Create Date: 2026-10-17

Users (role USER or MANAGER) and the work orders they create and are assigned.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "a1c4e7f20b93"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

user_role = sa.Enum("USER", "MANAGER", name="user_role")
work_order_priority = sa.Enum("LOW", "MED", "HIGH", name="work_order_priority")
work_order_status = sa.Enum("OPEN", "IN_PROGRESS", "CLOSED", name="work_order_status")


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "app_user",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("hashed_password", sa.String(), nullable=False),
        sa.Column("role", user_role, nullable=False, server_default="USER"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_table(
        "work_order",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("priority", work_order_priority, nullable=False),
        sa.Column("status", work_order_status, nullable=False, server_default="OPEN"),
        sa.Column("created_by_id", sa.String(), nullable=False),
        sa.Column("assigned_to_id", sa.String(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["created_by_id"], ["app_user.id"], ondelete="RESTRICT"
        ),
        sa.ForeignKeyConstraint(
            ["assigned_to_id"], ["app_user.id"], ondelete="SET NULL"
        ),
    )
    op.create_index("ix_work_order_created_by_id", "work_order", ["created_by_id"])
    op.create_index("ix_work_order_assigned_to_id", "work_order", ["assigned_to_id"])
    op.create_index("ix_work_order_created_at", "work_order", ["created_at"])
    op.create_index(
        "ix_work_order_status_priority", "work_order", ["status", "priority"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_work_order_status_priority", table_name="work_order")
    op.drop_index("ix_work_order_created_at", table_name="work_order")
    op.drop_index("ix_work_order_assigned_to_id", table_name="work_order")
    op.drop_index("ix_work_order_created_by_id", table_name="work_order")
    op.drop_table("work_order")
    op.drop_table("app_user")
    work_order_status.drop(op.get_bind(), checkfirst=True)
    work_order_priority.drop(op.get_bind(), checkfirst=True)
    user_role.drop(op.get_bind(), checkfirst=True)
