"""Airport dataset table.

Revision ID: 001
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa


revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # ── airports ──────────────────────────────────────────────────────
    op.create_table(
        "airports",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("icao_code", sa.String(4), nullable=False),
        sa.Column("iata_code", sa.String(3), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("city", sa.String(255), nullable=False),
        sa.Column("country", sa.String(255), nullable=False),
        sa.Column("lat_deg", sa.Integer, nullable=False),
        sa.Column("lat_min", sa.Integer, nullable=False),
        sa.Column("lat_sec", sa.Integer, nullable=False),
        sa.Column("lat_dir", sa.String(1), nullable=False),
        sa.Column("lon_deg", sa.Integer, nullable=False),
        sa.Column("lon_min", sa.Integer, nullable=False),
        sa.Column("lon_sec", sa.Integer, nullable=False),
        sa.Column("lon_dir", sa.String(1), nullable=False),
        sa.Column("altitude", sa.Integer, nullable=False),
        sa.Column("lat_decimal", sa.Float, nullable=False),
        sa.Column("lon_decimal", sa.Float, nullable=False),
    )
    op.create_index("idx_airports_iata", "airports", ["iata_code"])


def downgrade() -> None:
    op.drop_index("idx_airports_iata", table_name="airports")
    op.drop_table("airports")
