"""Location repository: create, find by barcode, get, list, seed the unknown location."""
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from labwhere_core.errors import NotFoundError, PersistenceError
from labwhere_core.location import (
    UNKNOWN_LOCATION_ID,
    UNKNOWN_LOCATION_TYPE_ID,
    Location,
    unknown_location,
)
from labwhere_core.naming import ensure_valid_name
from models.location import Location as LocationModel
from models.location_type import LocationType as LocationTypeModel
from repositories.store_errors import store_errors

LOG = logging.getLogger(__name__)

UNKNOWN_LOCATION_TYPE_NAME = "Unknown"


def _to_entity(row: LocationModel) -> Location:
    if row.id == UNKNOWN_LOCATION_ID:
        return unknown_location()
    return Location(row.id, row.name, row.location_type_id, row.barcode)


def seed_unknown_location(session: Session) -> None:
    """
    Insert location type 1 and the unknown location row (id 999) if missing, and commit.
    Reserving 999 keeps real locations from ever being handed that id.
    """
    sentinel = unknown_location()
    with store_errors(session, "seed unknown location"):
        if session.get(LocationTypeModel, UNKNOWN_LOCATION_TYPE_ID) is None:
            session.add(LocationTypeModel(id=UNKNOWN_LOCATION_TYPE_ID, name=UNKNOWN_LOCATION_TYPE_NAME))
            session.flush()
        if session.get(LocationModel, UNKNOWN_LOCATION_ID) is None:
            session.add(
                LocationModel(
                    id=sentinel.id,
                    name=sentinel.name,
                    barcode=sentinel.barcode,
                    location_type_id=sentinel.location_type_id,
                )
            )
        session.commit()


def create_location(session: Session, name: str, location_type_id: int) -> Location:
    """
    Create a location and return it with its barcode.
    The barcode needs the store-assigned id, so the row is inserted without one, flushed,
    then updated; both statements commit together so no reader sees a NULL barcode.
    """
    ensure_valid_name(name)
    with store_errors(session, "create location"):
        row = LocationModel(name=name, location_type_id=location_type_id)
        session.add(row)
        session.flush()  # get row.id before generating the barcode
        if row.id == UNKNOWN_LOCATION_ID:
            raise PersistenceError(
                f"Location id {UNKNOWN_LOCATION_ID} is reserved for the unknown location",
                code="reserved_id",
            )
        location = Location(row.id, name, location_type_id).assign_barcode()
        row.barcode = location.barcode
        session.commit()
    LOG.info("Created location id=%s barcode=%s", location.id, location.barcode)
    return location


def find_location_by_barcode(session: Session, barcode: str) -> Location:
    """Return the location with this barcode. Raises NotFoundError."""
    with store_errors(session, "find location"):
        row = session.execute(
            select(LocationModel).where(LocationModel.barcode == barcode).order_by(LocationModel.id)
        ).scalars().first()
    if row is None:
        raise NotFoundError("Location not found", details={"barcode": barcode})
    return _to_entity(row)


def get_location(session: Session, location_id: int) -> Location:
    """Return a location by id; id 999 is always the unknown location. Raises NotFoundError."""
    if location_id == UNKNOWN_LOCATION_ID:
        return unknown_location()
    with store_errors(session, "get location"):
        row = session.get(LocationModel, location_id)
    if row is None:
        raise NotFoundError("Location not found", details={"id": location_id})
    return _to_entity(row)


def list_locations(session: Session, location_type_id: Optional[int] = None) -> list[Location]:
    """Return all locations (optionally of one type) ordered by name."""
    query = select(LocationModel).order_by(LocationModel.name, LocationModel.id)
    if location_type_id is not None:
        query = query.where(LocationModel.location_type_id == location_type_id)
    with store_errors(session, "list locations"):
        result = session.execute(query)
        return [_to_entity(row) for row in result.scalars().all()]
