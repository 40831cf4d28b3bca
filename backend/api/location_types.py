"""Location type API routes."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.errors import http_error
from db import get_db
from labwhere_core.errors import LabwhereError
from repositories.location_type_repository import create_location_type as repo_create_location_type
from repositories.location_type_repository import list_location_types as repo_list_location_types
from schemas.location_types import LocationTypeCreate, LocationTypeResponse

router = APIRouter(prefix="/location-types", tags=["location-types"])


@router.get("", response_model=list[LocationTypeResponse])
def list_location_types(db: Session = Depends(get_db)) -> list[LocationTypeResponse]:
    """List all location types."""
    try:
        types = repo_list_location_types(db)
    except LabwhereError as e:
        raise http_error(e) from e
    return [LocationTypeResponse(id=t.id, name=t.name) for t in types]


@router.post("", response_model=LocationTypeResponse, status_code=status.HTTP_201_CREATED)
def create_location_type(
    body: LocationTypeCreate,
    db: Session = Depends(get_db),
) -> LocationTypeResponse:
    """Create a new location type."""
    try:
        location_type = repo_create_location_type(db, body.name)
    except LabwhereError as e:
        raise http_error(e) from e
    return LocationTypeResponse(id=location_type.id, name=location_type.name)
