# Schemas package
from .health import HealthResponse
from .labwares import LabwareResponse
from .location_types import LocationTypeCreate, LocationTypeResponse
from .locations import LocationCreate, LocationResponse
from .scan import ScannedLabware, ScanRequest, ScanResponse

__all__ = [
    "HealthResponse",
    "LabwareResponse",
    "LocationCreate",
    "LocationResponse",
    "LocationTypeCreate",
    "LocationTypeResponse",
    "ScanRequest",
    "ScanResponse",
    "ScannedLabware",
]
