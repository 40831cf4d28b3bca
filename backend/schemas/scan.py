"""Pydantic schemas for the scan API."""
from pydantic import BaseModel, Field


class ScanRequest(BaseModel):
    """Location barcode plus one or more labware barcodes to place there."""

    location_barcode: str = Field(min_length=1)
    labware_barcodes: list[str] = Field(min_length=1)


class ScannedLabware(BaseModel):
    """One labware recorded by a scan."""

    id: int
    barcode: str
    created: bool


class ScanResponse(BaseModel):
    """Result of a scan."""

    location_barcode: str
    labwares: list[ScannedLabware]
    message: str
