"""Pydantic schemas for location type API."""
from pydantic import BaseModel, Field


class LocationTypeCreate(BaseModel):
    """Payload for creating a location type."""

    name: str = Field(min_length=1, max_length=255)


class LocationTypeResponse(BaseModel):
    """Location type in API responses."""

    id: int
    name: str
