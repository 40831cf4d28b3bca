"""Location API routes."""
from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.errors import http_error
from db import get_db
from labwhere_core.errors import LabwhereError
from labwhere_core.location import Location
from repositories.labware_repository import count_labwares_by_location, list_labwares_by_location
from repositories.location_repository import create_location as repo_create_location
from repositories.location_repository import find_location_by_barcode
from repositories.location_repository import list_locations as repo_list_locations
from repositories.location_type_repository import get_location_type
from schemas.labwares import LabwareResponse
from schemas.locations import LocationCreate, LocationResponse

router = APIRouter(prefix="/locations", tags=["locations"])


def _location_to_response(loc: Location, labware_count: int) -> LocationResponse:
    """Build LocationResponse from a core Location and its labware count."""
    return LocationResponse(
        id=loc.id,
        name=loc.name,
        barcode=loc.barcode,
        location_type_id=loc.location_type_id,
        labware_count=labware_count,
    )


@router.get("", response_model=list[LocationResponse])
def list_locations(
    location_type_id: Optional[int] = None,
    db: Session = Depends(get_db),
) -> list[LocationResponse]:
    """List all locations, optionally of one location type."""
    try:
        locations = repo_list_locations(db, location_type_id)
        counts = count_labwares_by_location(db, [loc.id for loc in locations])
    except LabwhereError as e:
        raise http_error(e) from e
    return [_location_to_response(loc, counts.get(loc.id, 0)) for loc in locations]


@router.post("", response_model=LocationResponse, status_code=status.HTTP_201_CREATED)
def create_location(
    body: LocationCreate,
    db: Session = Depends(get_db),
) -> LocationResponse:
    """Create a new location; the response carries its generated barcode."""
    try:
        get_location_type(db, body.location_type_id)
        loc = repo_create_location(db, name=body.name, location_type_id=body.location_type_id)
        return _location_to_response(loc, 0)
    except LabwhereError as e:
        raise http_error(e) from e


@router.get("/{barcode}", response_model=LocationResponse)
def get_location_by_barcode(barcode: str, db: Session = Depends(get_db)) -> LocationResponse:
    """Get a location by barcode."""
    try:
        loc = find_location_by_barcode(db, barcode)
        return _location_to_response(loc, count_labwares_by_location(db, [loc.id]).get(loc.id, 0))
    except LabwhereError as e:
        raise http_error(e) from e


@router.get("/{barcode}/labwares", response_model=list[LabwareResponse])
def list_location_labwares(barcode: str, db: Session = Depends(get_db)) -> list[LabwareResponse]:
    """List the labware stored in a location."""
    try:
        loc = find_location_by_barcode(db, barcode)
        labwares = list_labwares_by_location(db, loc.id)
    except LabwhereError as e:
        raise http_error(e) from e
    return [
        LabwareResponse(id=lw.id, barcode=lw.barcode, location_id=lw.location_id, location_barcode=loc.barcode)
        for lw in labwares
    ]
