"""Initial schema

Revision ID: 001
Revises:
Create Date: 2025-10-11 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create employees table; enum columns hold the integer member values
    op.create_table(
        "employees",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("first_name", sa.String(60), nullable=False),
        sa.Column("last_name", sa.String(60), nullable=False),
        sa.Column("gender", sa.Integer(), nullable=False),
        sa.Column("mobile_number", sa.String(11), nullable=False),
        sa.Column("birth_date", sa.String(10), nullable=True),
        sa.Column("education_level", sa.Integer(), nullable=False),
        sa.Column("field_of_study", sa.String(100), nullable=True),
        sa.Column("position", sa.String(80), nullable=False),
        sa.Column("email", sa.String(150), nullable=False),
        sa.Column("hire_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("description", sa.String(500), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_employees_email"),
        sa.UniqueConstraint("mobile_number", name="uq_employees_mobile_number"),
    )
    op.create_index("idx_employees_position", "employees", ["position"])

    # Create tasks table; dates are Persian-calendar yyyy/MM/dd strings
    op.create_table(
        "tasks",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(150), nullable=False),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column("status", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("priority", sa.Integer(), nullable=False, server_default="2"),
        sa.Column("due_date", sa.String(10), nullable=False),
        sa.Column("created_at", sa.String(10), nullable=True),
        sa.Column("updated_at", sa.String(10), nullable=True),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_tasks_is_deleted", "tasks", ["is_deleted"])


def downgrade() -> None:
    op.drop_index("idx_tasks_is_deleted", table_name="tasks")
    op.drop_table("tasks")
    op.drop_index("idx_employees_position", table_name="employees")
    op.drop_table("employees")
