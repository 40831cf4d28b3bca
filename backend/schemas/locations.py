"""Pydantic schemas for location API."""
from pydantic import BaseModel


class LocationCreate(BaseModel):
    """Payload for creating a location. Name rules are checked by the core (422 on failure)."""

    name: str
    location_type_id: int


class LocationResponse(BaseModel):
    """Location in API responses."""

    id: int
    name: str
    barcode: str | None = None
    location_type_id: int
    labware_count: int = 0
