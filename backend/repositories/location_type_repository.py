"""LocationType repository: create, get, list."""
import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from labwhere_core.errors import NotFoundError, ValidationError
from labwhere_core.location_type import LocationType
from models.location_type import LocationType as LocationTypeModel
from repositories.store_errors import store_errors

LOG = logging.getLogger(__name__)


def _to_entity(row: LocationTypeModel) -> LocationType:
    return LocationType(row.id, row.name)


def create_location_type(session: Session, name: str) -> LocationType:
    """Insert a location type, commit, and return it with its store-assigned id."""
    if not name or not name.strip():
        raise ValidationError("Location type name is required", code="blank_name")
    with store_errors(session, "create location type"):
        row = LocationTypeModel(name=name)
        session.add(row)
        session.commit()
        session.refresh(row)
    LOG.info("Created location type id=%s name=%s", row.id, row.name)
    return _to_entity(row)


def get_location_type(session: Session, location_type_id: int) -> LocationType:
    """Return a location type by id. Raises NotFoundError."""
    with store_errors(session, "get location type"):
        row = session.get(LocationTypeModel, location_type_id)
    if row is None:
        raise NotFoundError("Location type not found", details={"id": location_type_id})
    return _to_entity(row)


def list_location_types(session: Session) -> list[LocationType]:
    """Return all location types ordered by name."""
    with store_errors(session, "list location types"):
        result = session.execute(select(LocationTypeModel).order_by(LocationTypeModel.name))
        return [_to_entity(row) for row in result.scalars().all()]
