"""Labware: a tracked item known only by its barcode and where it is."""
from typing import Optional

from labwhere_core.entity import Entity
from labwhere_core.location import UNKNOWN_LOCATION_ID, Location


class Labware(Entity):
    """
    Labware is stored in a location. If no location is given the labware is placed
    at the unknown location, so location_id is never None.
    """

    __slots__ = ("id", "barcode", "location_id")

    def __init__(self, id: Optional[int], barcode: str, location: Optional[Location] = None) -> None:
        location_id = location.id if location is not None else UNKNOWN_LOCATION_ID
        self._set_fields(id=id, barcode=barcode, location_id=location_id)

    @classmethod
    def from_location_id(cls, id: Optional[int], barcode: str, location_id: int) -> "Labware":
        """Build from a stored row where only the location id is known."""
        labware = cls(id, barcode)
        labware._set_fields(location_id=location_id)
        return labware

    def moved_to(self, location: Optional[Location]) -> "Labware":
        """Return a copy of this labware at another location (unknown if None)."""
        return Labware(self.id, self.barcode, location)

    @property
    def at_unknown_location(self) -> bool:
        return self.location_id == UNKNOWN_LOCATION_ID
