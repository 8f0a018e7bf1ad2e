"""Initial schema.

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

revision: str = "001_initial_schema"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

SCHEDULE_DATE_COLUMNS = (
    "lam_grid",
    "lam_hull",
    "lam_deck",
    "trimandgrind_grid",
    "trimandgrind_hull",
    "trimandgrind_deck",
    "patchanddetail_hull",
    "patchanddetail_deck",
    "open_hull_1",
    "open_deck_1",
    "open_hull_2",
    "open_deck_2",
    "final_1",
    "final_2",
    "final_3",
    "commissioning",
    "shipment",
)


def upgrade() -> None:
    """Create all initial tables."""
    # --- models ---
    op.create_table(
        "models",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    # --- model_options ---
    op.create_table(
        "model_options",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("model_id", sa.Integer(), nullable=False),
        sa.Column("option_text", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["model_id"], ["models.id"], ondelete="CASCADE"),
    )

    # --- boat_order_headers ---
    op.create_table(
        "boat_order_headers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("model_id", sa.Integer(), nullable=False),
        sa.Column("header_text", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["model_id"], ["models.id"], ondelete="CASCADE"),
    )

    # --- stations ---
    op.create_table(
        "stations",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("station_sequence", sa.Integer(), nullable=True, comment="Presentation order; not a state machine"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    # --- schedule_groups ---
    op.create_table(
        "schedule_groups",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("schedule_group", sa.String(100), nullable=False),
        sa.Column("days_offset", sa.Integer(), nullable=True),
        sa.Column("offset_type", sa.String(50), nullable=True),
        sa.Column("station", sa.String(100), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    # --- task_data ---
    op.create_table(
        "task_data",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("model", sa.Integer(), nullable=False),
        sa.Column("station", sa.String(100), nullable=False, comment="Station name"),
        sa.Column("task_name", sa.String(300), nullable=False),
        sa.Column("labor_hours", sa.Float(), server_default="0", nullable=False),
        sa.Column("associated_options", postgresql.JSONB(), nullable=True, comment="Model option ids that trigger this task"),
        sa.Column("schedule_group", sa.Integer(), nullable=True),
        sa.Column("duration_days", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["model"], ["models.id"]),
        sa.ForeignKeyConstraint(["schedule_group"], ["schedule_groups.id"], ondelete="SET NULL"),
    )
    op.create_index("ix_task_data_model", "task_data", ["model"])

    # --- boat_orders ---
    op.create_table(
        "boat_orders",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("hull_number", sa.String(20), nullable=False),
        sa.Column("revision_date", sa.Date(), nullable=False),
        sa.Column("file_name", sa.String(255), nullable=False),
        sa.Column("model", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["model"], ["models.id"]),
    )
    op.create_index("ix_boat_orders_hull_number", "boat_orders", ["hull_number"])

    # --- boat_order_options ---
    op.create_table(
        "boat_order_options",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("boat_order_id", sa.Integer(), nullable=False),
        sa.Column("option_text", sa.Text(), nullable=False),
        sa.Column("is_header", sa.Boolean(), server_default="false", nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["boat_order_id"], ["boat_orders.id"], ondelete="CASCADE"),
    )

    # --- tasks_per_hull ---
    op.create_table(
        "tasks_per_hull",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("hull_number", sa.String(20), nullable=False),
        sa.Column("model", sa.Integer(), nullable=False),
        sa.Column("station", sa.String(100), nullable=False),
        sa.Column("task_name", sa.String(300), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("status", sa.String(20), server_default="Upcoming", nullable=False),
        sa.Column("completed_by", sa.String(50), nullable=True, comment="Employee id scanned at status change"),
        sa.Column("applicable", sa.Boolean(), server_default="true", nullable=False),
        sa.Column("schedule_group", sa.Integer(), nullable=True),
        sa.Column("task_data_id", sa.Integer(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["model"], ["models.id"]),
        sa.ForeignKeyConstraint(["schedule_group"], ["schedule_groups.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["task_data_id"], ["task_data.id"]),
    )
    op.create_index("ix_tasks_per_hull_hull_number", "tasks_per_hull", ["hull_number"])

    # --- company_holidays ---
    op.create_table(
        "company_holidays",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("holiday_name", sa.String(100), nullable=False),
        sa.Column("holiday_date", sa.Date(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_company_holidays_holiday_date", "company_holidays", ["holiday_date"])

    # --- do_not_show_options ---
    op.create_table(
        "do_not_show_options",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("option_text", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    # --- production_schedule ---
    op.create_table(
        "production_schedule",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("slot_number", sa.String(20), nullable=False, comment="E.g. FY24-1"),
        sa.Column("takt", sa.Integer(), nullable=True, comment="Days between stations"),
        sa.Column("boat_model", sa.Integer(), nullable=True),
        sa.Column("hull_number", sa.String(20), nullable=True),
        *[sa.Column(column, sa.Date(), nullable=True) for column in SCHEDULE_DATE_COLUMNS],
        sa.Column("schedule_from", sa.String(30), nullable=True),
        sa.Column("schedule_direction", sa.String(20), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["boat_model"], ["models.id"], ondelete="SET NULL"),
    )


def downgrade() -> None:
    """Drop all tables in reverse order."""
    op.drop_table("production_schedule")
    op.drop_table("do_not_show_options")
    op.drop_index("ix_company_holidays_holiday_date", table_name="company_holidays")
    op.drop_table("company_holidays")
    op.drop_index("ix_tasks_per_hull_hull_number", table_name="tasks_per_hull")
    op.drop_table("tasks_per_hull")
    op.drop_table("boat_order_options")
    op.drop_index("ix_boat_orders_hull_number", table_name="boat_orders")
    op.drop_table("boat_orders")
    op.drop_index("ix_task_data_model", table_name="task_data")
    op.drop_table("task_data")
    op.drop_table("schedule_groups")
    op.drop_table("stations")
    op.drop_table("boat_order_headers")
    op.drop_table("model_options")
    op.drop_table("models")
