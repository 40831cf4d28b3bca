"""API tests: scan endpoint."""
import pytest

from repositories.labware_repository import create_labware, find_labware_by_barcode
from repositories.location_repository import create_location

pytestmark = pytest.mark.api


@pytest.fixture
def location(db_session, freezer):
    """A stored location to scan into."""
    return create_location(db_session, "Scan Location", freezer.id)


def test_scan_success(client, db_session, freezer, location):
    """POST /api/scan creates new labware and moves existing labware."""
    other = create_location(db_session, "Other Location", freezer.id)
    create_labware(db_session, "existing-1", other.id)
    r = client.post(
        "/api/scan",
        json={"location_barcode": location.barcode, "labware_barcodes": ["existing-1", "fresh-1"]},
    )
    assert r.status_code == 200
    data = r.json()
    assert data["location_barcode"] == location.barcode
    created = {lw["barcode"]: lw["created"] for lw in data["labwares"]}
    assert created == {"existing-1": False, "fresh-1": True}
    assert data["message"] == f"2 labware stored in {location.barcode}"
    assert find_labware_by_barcode(db_session, "existing-1").location_id == location.id


def test_scan_unknown_location_404(client):
    """POST /api/scan with an unknown location barcode returns 404."""
    r = client.post("/api/scan", json={"location_barcode": "lw-nowhere-1", "labware_barcodes": ["x"]})
    assert r.status_code == 404


def test_scan_requires_labware_barcodes(client, location):
    """POST /api/scan with no labware barcodes returns 422."""
    r = client.post("/api/scan", json={"location_barcode": location.barcode, "labware_barcodes": []})
    assert r.status_code == 422


def test_scan_get_not_allowed(client):
    """GET /api/scan is not a scan."""
    assert client.get("/api/scan").status_code == 405
