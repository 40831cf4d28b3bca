"""Location of the Labware, plus the reserved unknown location."""
from typing import Optional

from labwhere_core.barcode import generate_barcode
from labwhere_core.entity import Entity
from labwhere_core.errors import ValidationError
from labwhere_core.naming import ensure_valid_name

UNKNOWN_LOCATION_ID = 999
UNKNOWN_LOCATION_NAME = "UNKNOWN"
UNKNOWN_LOCATION_TYPE_ID = 1


class Location(Entity):
    """
    Physical place belonging to one LocationType.
    The name is validated on construction (InvalidNameFormatError); barcode stays None
    until the store has assigned an id and assign_barcode() is called.
    """

    __slots__ = ("id", "name", "barcode", "location_type_id")

    def __init__(
        self,
        id: Optional[int],
        name: str,
        location_type_id: int,
        barcode: Optional[str] = None,
    ) -> None:
        ensure_valid_name(name)
        self._set_fields(id=id, name=name, barcode=barcode, location_type_id=location_type_id)

    def assign_barcode(self) -> "Location":
        """Return a copy of this location with its barcode derived from name and id."""
        if self.id is None:
            raise ValidationError("Location id is required before a barcode can be generated")
        return Location(self.id, self.name, self.location_type_id, generate_barcode(self.name, self.id))

    @property
    def is_unknown(self) -> bool:
        return self.id == UNKNOWN_LOCATION_ID

    @staticmethod
    def unknown() -> "Location":
        """The reserved unknown location (same object on every call)."""
        return UNKNOWN_LOCATION


# Built once at import; the import lock makes this exactly-once across threads.
UNKNOWN_LOCATION = Location(
    UNKNOWN_LOCATION_ID,
    UNKNOWN_LOCATION_NAME,
    UNKNOWN_LOCATION_TYPE_ID,
).assign_barcode()


def unknown_location() -> Location:
    """Return the reserved unknown location: id 999, name UNKNOWN, barcode lw-unknown-999."""
    return UNKNOWN_LOCATION
