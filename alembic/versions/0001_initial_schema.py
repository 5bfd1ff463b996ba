"""Initial schema: all six record tables.

Money columns hold fixed-point decimal text (two places), written and read
through village.db.types.DecimalText.

Revision ID: 0001
Revises:
Create Date: 2026-10-19

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # -- Residents --
    op.create_table(
        "residents",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("address", sa.Text, nullable=False),
        sa.Column("job", sa.Text, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )

    # -- Finance --
    op.create_table(
        "village_finance",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("type", sa.String(16), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("amount", sa.String(17), nullable=False),
        sa.Column("category", sa.Text, nullable=False),
        sa.Column("date", sa.Date, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_village_finance_type", "village_finance", ["type"])

    # -- Budgets --
    op.create_table(
        "village_budget",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("category", sa.Text, nullable=False),
        sa.Column("allocated_amount", sa.String(17), nullable=False),
        sa.Column("used_amount", sa.String(17), nullable=False, server_default="0.00"),
        sa.Column("year", sa.Integer, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_village_budget_year", "village_budget", ["year"])

    # -- Events --
    op.create_table(
        "village_events",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("location", sa.Text, nullable=False),
        sa.Column("event_date", sa.Date, nullable=False),
        sa.Column("organizer", sa.Text, nullable=False),
        sa.Column("participant_count", sa.Integer, nullable=True),
        sa.Column("budget", sa.String(17), nullable=True),
        sa.Column("status", sa.String(16), nullable=False, server_default="planned"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_village_events_status", "village_events", ["status"])

    # -- Assets --
    op.create_table(
        "village_assets",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("category", sa.Text, nullable=False),
        sa.Column("value", sa.String(17), nullable=False),
        sa.Column("condition", sa.String(16), nullable=False),
        sa.Column("location", sa.Text, nullable=False),
        sa.Column("purchase_date", sa.Date, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_village_assets_category", "village_assets", ["category"])

    # -- Public services --
    op.create_table(
        "public_services",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("requirements", sa.Text, nullable=True),
        sa.Column("process_time", sa.Text, nullable=True),
        sa.Column("cost", sa.String(12), nullable=True),
        sa.Column("contact_person", sa.Text, nullable=True),
        sa.Column("office_hours", sa.Text, nullable=True),
        sa.Column("is_active", sa.Integer, nullable=False, server_default="1"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("public_services")
    op.drop_table("village_assets")
    op.drop_table("village_events")
    op.drop_table("village_budget")
    op.drop_table("village_finance")
    op.drop_table("residents")
