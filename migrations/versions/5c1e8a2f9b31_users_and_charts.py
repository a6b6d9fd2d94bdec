"""users and charts

Revision ID: 5c1e8a2f9b31
Revises:
Create Date: 2026-10-19 10:12:41.508213

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5c1e8a2f9b31"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the users and charts tables."""
    op.create_table(
        "users",
        sa.Column("username", sa.Text(), nullable=False),
        sa.Column("audio_url", sa.Text(), nullable=False),
        sa.Column("key_presses", sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint("username"),
    )
    op.create_table(
        "charts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_username", sa.Text(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("audio_url", sa.Text(), nullable=False),
        sa.Column("key_presses", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_username"], ["users.username"]),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_charts_user_username", "charts", ["user_username"])
    op.create_index("ix_charts_created_at", "charts", ["created_at"])


def downgrade() -> None:
    """Drop the users and charts tables."""
    op.drop_index("ix_charts_created_at", table_name="charts")
    op.drop_index("ix_charts_user_username", table_name="charts")
    op.drop_table("charts")
    op.drop_table("users")
