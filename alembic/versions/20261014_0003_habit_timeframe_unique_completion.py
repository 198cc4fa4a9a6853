"""habit timeframe column and one completion per habit per day

Revision ID: 20261014_0003
Revises: 20261008_0002
Create Date: 2026-10-14 09:05:00
"""

from alembic import op
import sqlalchemy as sa


revision = "20261014_0003"
down_revision = "20261008_0002"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.add_column("habits", sa.Column("timeframe", sa.String(length=16), nullable=True))

    # Keep the newest row when (habit_id, date) was written twice.
    op.execute(
        """
        DELETE FROM habit_completions
        WHERE id NOT IN (
            SELECT MAX(id) FROM habit_completions GROUP BY habit_id, date
        )
        """
    )
    with op.batch_alter_table("habit_completions") as batch:
        batch.create_unique_constraint("uq_habit_completion_per_day", ["habit_id", "date"])


def downgrade() -> None:
    with op.batch_alter_table("habit_completions") as batch:
        batch.drop_constraint("uq_habit_completion_per_day", type_="unique")
    op.drop_column("habits", "timeframe")
