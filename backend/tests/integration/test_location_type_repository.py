"""Integration tests: location type repository with test DB session."""
import pytest

from labwhere_core.errors import NotFoundError, ValidationError
from repositories.location_type_repository import (
    create_location_type,
    get_location_type,
    list_location_types,
)

pytestmark = pytest.mark.integration


def test_create_location_type(db_session):
    """create_location_type returns the type with a store-assigned id."""
    location_type = create_location_type(db_session, "Building")
    assert location_type.id >= 1
    assert location_type.name == "Building"


def test_create_location_type_ids_increase(db_session):
    """Each create gets a new id."""
    first = create_location_type(db_session, "Room")
    second = create_location_type(db_session, "Shelf")
    assert second.id > first.id


def test_create_location_type_blank_name(db_session):
    """Blank names are rejected before any insert."""
    with pytest.raises(ValidationError):
        create_location_type(db_session, "  ")


def test_get_location_type(db_session, freezer):
    """get_location_type returns an equal entity."""
    assert get_location_type(db_session, freezer.id) == freezer


def test_get_location_type_not_found(db_session):
    """get_location_type raises NotFoundError for unknown id."""
    with pytest.raises(NotFoundError):
        get_location_type(db_session, 424242)


def test_list_location_types(db_session):
    """list_location_types returns types ordered by name."""
    create_location_type(db_session, "Zeta")
    create_location_type(db_session, "Alpha")
    names = [t.name for t in list_location_types(db_session)]
    assert names.index("Alpha") < names.index("Zeta")
