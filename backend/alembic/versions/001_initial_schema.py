"""Initial schema — employees, timesheets, menus, menu_items.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "employees",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("position", sa.Text, nullable=False),
        sa.Column("wage", sa.Numeric, nullable=False),
        sa.Column("is_current_employee", sa.Integer, nullable=False, server_default="1"),
    )

    op.create_table(
        "timesheets",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("hours", sa.Numeric, nullable=False),
        sa.Column("rate", sa.Numeric, nullable=False),
        sa.Column("date", sa.Numeric, nullable=False),
        sa.Column("employee_id", sa.Integer, sa.ForeignKey("employees.id"), nullable=False),
    )
    op.create_index("ix_timesheets_employee_id", "timesheets", ["employee_id"])

    op.create_table(
        "menus",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("title", sa.Text, nullable=False),
    )

    op.create_table(
        "menu_items",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("inventory", sa.Numeric, nullable=False),
        sa.Column("price", sa.Numeric, nullable=False),
        sa.Column("menu_id", sa.Integer, sa.ForeignKey("menus.id"), nullable=False),
    )
    op.create_index("ix_menu_items_menu_id", "menu_items", ["menu_id"])


def downgrade() -> None:
    op.drop_index("ix_menu_items_menu_id", table_name="menu_items")
    op.drop_table("menu_items")
    op.drop_table("menus")
    op.drop_index("ix_timesheets_employee_id", table_name="timesheets")
    op.drop_table("timesheets")
    op.drop_table("employees")
