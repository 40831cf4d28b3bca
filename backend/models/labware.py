"""Labware model for DB persistence."""
from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from models import Base


class Labware(Base):
    """labwares table: id, barcode, location_id."""

    __tablename__ = "labwares"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    barcode: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    # The unknown location is the reserved locations row 999.
    location_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("locations.id"),
        nullable=False,
        index=True,
    )
