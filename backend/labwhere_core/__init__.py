# LabWhere core: entities, name validation, barcode generation, errors
from labwhere_core.barcode import generate_barcode
from labwhere_core.errors import (
    InvalidNameFormatError,
    LabwhereError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from labwhere_core.labware import Labware
from labwhere_core.location import UNKNOWN_LOCATION_ID, Location, unknown_location
from labwhere_core.location_type import LocationType
from labwhere_core.naming import ensure_valid_name, validate_name

__all__ = [
    "InvalidNameFormatError",
    "Labware",
    "LabwhereError",
    "Location",
    "LocationType",
    "NotFoundError",
    "PersistenceError",
    "UNKNOWN_LOCATION_ID",
    "ValidationError",
    "ensure_valid_name",
    "generate_barcode",
    "unknown_location",
    "validate_name",
]
