"""Scan API: record labware barcodes into a location."""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.errors import http_error
from db import get_db
from labwhere_core.errors import LabwhereError
from repositories.labware_repository import scan_labwares
from schemas.scan import ScannedLabware, ScanRequest, ScanResponse

LOG = logging.getLogger(__name__)

router = APIRouter(tags=["scan"])


@router.post("/scan", response_model=ScanResponse)
def scan(body: ScanRequest, db: Session = Depends(get_db)) -> ScanResponse:
    """Receive a location barcode and labware barcodes, and scan them into LabWhere."""
    LOG.info("Processing request for /scan endpoint: location=%s", body.location_barcode)
    try:
        results = scan_labwares(db, body.location_barcode, body.labware_barcodes)
    except LabwhereError as e:
        LOG.error("Scan into %s failed: %s", body.location_barcode, e)
        raise http_error(e) from e
    return ScanResponse(
        location_barcode=body.location_barcode,
        labwares=[
            ScannedLabware(id=r.labware.id, barcode=r.labware.barcode, created=r.created)
            for r in results
        ],
        message=f"{len(results)} labware stored in {body.location_barcode}",
    )
