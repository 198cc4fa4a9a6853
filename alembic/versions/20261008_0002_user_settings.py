"""add user settings

Revision ID: 20261008_0002
Revises: 20261005_0001
Create Date: 2026-10-08 11:20:00
"""

from alembic import op
import sqlalchemy as sa


revision = "20261008_0002"
down_revision = "20261005_0001"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "user_settings",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("dark_mode", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("time_range", sa.String(length=16), nullable=False, server_default="month"),
        sa.Column("show_quotes", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("reminder_time", sa.String(length=5), nullable=False, server_default="18:00"),
        sa.Column("reminder_enabled", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("email_notifications", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("compact_view", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_user_settings_user_id", "user_settings", ["user_id"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_user_settings_user_id", table_name="user_settings")
    op.drop_table("user_settings")
