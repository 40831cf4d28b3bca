"""create_labwhere_tables

Revision ID: b7d1e2f3a4c5
Revises:
Create Date: 2026-10-19 10:12:44.201937

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "b7d1e2f3a4c5"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create location_types, locations and labwares, and seed the unknown location."""
    location_types = op.create_table(
        "location_types",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_location_types"),
        sqlite_autoincrement=True,
    )
    locations = op.create_table(
        "locations",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("barcode", sa.String(length=255), nullable=True),
        sa.Column("location_type_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["location_type_id"],
            ["location_types.id"],
            name="fk_locations_location_type_id_location_types",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_locations"),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_locations_barcode", "locations", ["barcode"])
    op.create_table(
        "labwares",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("barcode", sa.String(length=255), nullable=False),
        sa.Column("location_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["location_id"],
            ["locations.id"],
            name="fk_labwares_location_id_locations",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_labwares"),
        sa.UniqueConstraint("barcode", name="uq_labwares_barcode"),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_labwares_location_id", "labwares", ["location_id"])

    # Id 999 is reserved for the unknown location; labware with no location points at it.
    op.bulk_insert(location_types, [{"id": 1, "name": "Unknown"}])
    op.bulk_insert(
        locations,
        [{"id": 999, "name": "UNKNOWN", "barcode": "lw-unknown-999", "location_type_id": 1}],
    )
    if op.get_bind().dialect.name == "postgresql":
        op.execute("SELECT setval(pg_get_serial_sequence('location_types', 'id'), 1)")
        op.execute("SELECT setval(pg_get_serial_sequence('locations', 'id'), 999)")


def downgrade() -> None:
    """Drop the LabWhere tables."""
    op.drop_index("ix_labwares_location_id", table_name="labwares")
    op.drop_table("labwares", if_exists=True)
    op.drop_index("ix_locations_barcode", table_name="locations")
    op.drop_table("locations", if_exists=True)
    op.drop_table("location_types", if_exists=True)
