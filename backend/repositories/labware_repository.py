"""Labware repository: create, update, find by barcode, list and count by location, scan."""
import logging
from collections.abc import Iterable
from typing import NamedTuple, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from labwhere_core.errors import NotFoundError, PersistenceError, ValidationError
from labwhere_core.labware import Labware
from labwhere_core.location import UNKNOWN_LOCATION_ID, Location
from models.labware import Labware as LabwareModel
from repositories.location_repository import find_location_by_barcode, get_location
from repositories.store_errors import store_errors

LOG = logging.getLogger(__name__)


class ScanResult(NamedTuple):
    """One labware recorded by a scan; created is False when it already existed and was moved."""

    labware: Labware
    created: bool


def _to_entity(row: LabwareModel) -> Labware:
    return Labware.from_location_id(row.id, row.barcode, row.location_id)


def _normalise_barcode(barcode: str) -> str:
    barcode = barcode.strip() if barcode else ""
    if not barcode:
        raise ValidationError("Labware barcode is required", code="blank_barcode")
    return barcode


def _refetch_location(session: Session, location_id: int) -> Location:
    """Resolve the location just written; a dangling reference is a persistence failure."""
    try:
        return get_location(session, location_id)
    except NotFoundError as e:
        raise PersistenceError(
            f"Location {location_id} does not exist",
            code="dangling_location",
            details={"location_id": location_id},
        ) from e


def _insert_labware(session: Session, barcode: str, location_id: int) -> Labware:
    # flush only; the caller owns the commit
    row = LabwareModel(barcode=barcode, location_id=location_id)
    session.add(row)
    session.flush()  # get row.id
    location = _refetch_location(session, location_id)
    return Labware(row.id, barcode, location)


def _move_labware(session: Session, labware: Labware) -> Labware:
    # flush only; the caller owns the commit
    row = session.get(LabwareModel, labware.id)
    if row is None:
        raise PersistenceError(
            f"Labware {labware.id} does not exist",
            code="missing_labware",
            details={"id": labware.id},
        )
    row.location_id = labware.location_id
    session.flush()
    location = _refetch_location(session, labware.location_id)
    return Labware(row.id, row.barcode, location)


def create_labware(session: Session, barcode: str, location_id: int = UNKNOWN_LOCATION_ID) -> Labware:
    """
    Insert a labware at location_id, commit, and return it.
    The barcode is stripped of surrounding whitespace, as scans are.
    The location is fetched again after the insert; if it does not exist the insert is
    rolled back and PersistenceError is raised (no fallback to the unknown location).
    """
    barcode = _normalise_barcode(barcode)
    with store_errors(session, "create labware"):
        labware = _insert_labware(session, barcode, location_id)
        session.commit()
    LOG.info("Created labware id=%s barcode=%s location_id=%s", labware.id, barcode, labware.location_id)
    return labware


def update_labware(session: Session, labware: Labware) -> Labware:
    """Move a stored labware to labware.location_id, commit, and return it. Raises PersistenceError."""
    with store_errors(session, "update labware"):
        updated = _move_labware(session, labware)
        session.commit()
    LOG.info("Moved labware barcode=%s to location_id=%s", updated.barcode, updated.location_id)
    return updated


def find_labware_by_barcode(session: Session, barcode: str) -> Labware:
    """Return the labware with this barcode. Raises NotFoundError."""
    with store_errors(session, "find labware"):
        row = session.execute(
            select(LabwareModel).where(LabwareModel.barcode == barcode)
        ).scalar_one_or_none()
    if row is None:
        raise NotFoundError("Labware not found", details={"barcode": barcode})
    return _to_entity(row)


def list_labwares_by_location(session: Session, location_id: int) -> list[Labware]:
    """Return all labware at a location, ordered by barcode."""
    query = (
        select(LabwareModel)
        .where(LabwareModel.location_id == location_id)
        .order_by(LabwareModel.barcode)
    )
    with store_errors(session, "list labwares"):
        result = session.execute(query)
        return [_to_entity(row) for row in result.scalars().all()]


def count_labwares_by_location(session: Session, location_ids: Optional[Iterable[int]] = None) -> dict[int, int]:
    """
    Number of labware per location id, in one grouped query. Empty locations are absent.
    location_ids limits the count to those locations.
    """
    query = select(LabwareModel.location_id, func.count(LabwareModel.id)).group_by(LabwareModel.location_id)
    if location_ids is not None:
        query = query.where(LabwareModel.location_id.in_(list(location_ids)))
    with store_errors(session, "count labwares"):
        return {location_id: count for location_id, count in session.execute(query).all()}


def scan_labwares(session: Session, location_barcode: str, labware_barcodes: Iterable[str]) -> list[ScanResult]:
    """
    Record a scan: every labware barcode is placed at the location with location_barcode.
    Existing labware is moved, new barcodes are created. Blank and repeated barcodes are skipped.
    The whole scan is one transaction: if any labware fails, nothing is moved or created.
    Raises NotFoundError if the location does not exist.
    """
    location = find_location_by_barcode(session, location_barcode)
    results: list[ScanResult] = []
    seen: set[str] = set()
    with store_errors(session, "scan labwares"):
        for raw in labware_barcodes:
            barcode = raw.strip() if raw else ""
            if not barcode or barcode in seen:
                continue
            seen.add(barcode)
            row = session.execute(
                select(LabwareModel).where(LabwareModel.barcode == barcode)
            ).scalar_one_or_none()
            if row is None:
                results.append(ScanResult(_insert_labware(session, barcode, location.id), True))
            else:
                results.append(ScanResult(_move_labware(session, _to_entity(row).moved_to(location)), False))
        session.commit()
    LOG.info("Scanned %d labware into %s", len(results), location.barcode)
    return results
