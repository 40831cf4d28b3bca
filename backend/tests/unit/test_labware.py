"""Unit tests: core Labware entity."""
import pytest

from labwhere_core.labware import Labware
from labwhere_core.location import Location, unknown_location

pytestmark = pytest.mark.unit


def test_labware_new():
    """Labware takes its location_id from the given location."""
    location = Location(1, "Location1", 1)
    labware = Labware(1, "lw-1", location)
    assert labware.id == 1
    assert labware.barcode == "lw-1"
    assert labware.location_id == location.id
    assert not labware.at_unknown_location


def test_labware_no_location():
    """Without a location the labware is at the unknown location."""
    labware = Labware(1, "lw-1", None)
    assert labware.location_id == unknown_location().id
    assert labware.at_unknown_location


def test_labware_from_location_id():
    """from_location_id keeps the stored id; 999 reads as the unknown location."""
    assert Labware.from_location_id(1, "lw-1", 999).at_unknown_location
    assert Labware.from_location_id(1, "lw-1", 7).location_id == 7


def test_moved_to():
    """moved_to returns a copy at the new location."""
    labware = Labware(3, "trac-3")
    moved = labware.moved_to(Location(5, "Shelf", 1))
    assert moved.location_id == 5
    assert moved.id == 3 and moved.barcode == "trac-3"
    assert labware.location_id == 999


def test_labware_equality_and_to_dict():
    """Labware compares by values and renders as a dict."""
    labware = Labware(1, "lw-1", Location(2, "Shelf", 1))
    assert labware == Labware.from_location_id(1, "lw-1", 2)
    assert labware.to_dict() == {"id": 1, "barcode": "lw-1", "location_id": 2}
