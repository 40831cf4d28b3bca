"""Labware API routes."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.errors import http_error
from db import get_db
from labwhere_core.errors import LabwhereError
from repositories.labware_repository import find_labware_by_barcode
from repositories.location_repository import get_location
from schemas.labwares import LabwareResponse

router = APIRouter(prefix="/labwares", tags=["labwares"])


@router.get("/{barcode}", response_model=LabwareResponse)
def get_labware_by_barcode(barcode: str, db: Session = Depends(get_db)) -> LabwareResponse:
    """Get a labware by barcode, with the barcode of its location."""
    try:
        labware = find_labware_by_barcode(db, barcode)
        location = get_location(db, labware.location_id)
    except LabwhereError as e:
        raise http_error(e) from e
    return LabwareResponse(
        id=labware.id,
        barcode=labware.barcode,
        location_id=labware.location_id,
        location_barcode=location.barcode,
    )
