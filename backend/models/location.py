"""Location model for DB persistence."""
from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from models import Base


class Location(Base):
    """locations table: id, name, barcode, location_type_id."""

    __tablename__ = "locations"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # Derived from name and id, so NULL between insert and the barcode update (same transaction).
    barcode: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    location_type_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("location_types.id"),
        nullable=False,
    )
