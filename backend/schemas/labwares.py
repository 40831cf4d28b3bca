"""Pydantic schemas for labware API."""
from pydantic import BaseModel


class LabwareResponse(BaseModel):
    """Labware in API responses, with the barcode of the location it is in."""

    id: int
    barcode: str
    location_id: int
    location_barcode: str | None = None
