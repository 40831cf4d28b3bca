"""LocationType: a named category of location, e.g. Building, Room, Freezer."""
from labwhere_core.entity import Entity


class LocationType(Entity):
    """Category of location. id is assigned by the store and never changes."""

    __slots__ = ("id", "name")

    def __init__(self, id: int, name: str) -> None:
        self._set_fields(id=id, name=name)
