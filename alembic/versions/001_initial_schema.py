"""Initial schema — workers, units, assignment history.

Revision ID: 001
Revises: None
Create Date: 2025-11-11
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Workers
    op.create_table(
        "workers",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(320), unique=True, nullable=False),
        sa.Column("preferred_sector", sa.String(100), nullable=True),
        sa.Column("current_load", sa.Integer, nullable=False, server_default="0"),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False,
            server_default=sa.func.now(),
        ),
    )

    # Units
    op.create_table(
        "units",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("address", sa.Text, nullable=False),
        sa.Column("sector", sa.String(100), nullable=True),
        sa.Column("rooms", sa.Integer, nullable=False),
        sa.Column("area_m2", sa.Float, nullable=False),
        sa.Column("distance_km", sa.Float, nullable=False),
        sa.Column("difficulty", sa.Integer, nullable=False, server_default="3"),
        sa.Column("latitude", sa.Float, nullable=True),
        sa.Column("longitude", sa.Float, nullable=True),
        sa.Column(
            "worker_id", sa.String(36),
            sa.ForeignKey("workers.id", ondelete="SET NULL"), nullable=True,
        ),
        sa.Column("status", sa.String(20), nullable=False, server_default="available"),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), nullable=False,
            server_default=sa.func.now(),
        ),
        sa.CheckConstraint("difficulty BETWEEN 1 AND 5", name="ck_units_difficulty"),
        sa.CheckConstraint(
            "status IN ('available', 'assigned', 'inactive')", name="ck_units_status"
        ),
    )
    op.create_index("idx_units_worker", "units", ["worker_id"])
    op.create_index("idx_units_status", "units", ["status"])

    # Assignment history
    op.create_table(
        "assignment_history",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column(
            "unit_id", sa.String(36),
            sa.ForeignKey("units.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column(
            "worker_id", sa.String(36),
            sa.ForeignKey("workers.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column(
            "started_at", sa.DateTime(timezone=True), nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column("ended_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("balance_score", sa.Float, nullable=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index("idx_history_worker", "assignment_history", ["worker_id"])
    op.create_index("idx_history_unit", "assignment_history", ["unit_id"])
    # At most one open record per unit
    op.create_index(
        "uq_history_open_unit", "assignment_history", ["unit_id"],
        unique=True, postgresql_where=sa.text("ended_at IS NULL"),
    )


def downgrade() -> None:
    op.drop_table("assignment_history")
    op.drop_table("units")
    op.drop_table("workers")
