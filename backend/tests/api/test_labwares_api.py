"""API tests: labware endpoints."""
import pytest

from repositories.labware_repository import create_labware
from repositories.location_repository import create_location

pytestmark = pytest.mark.api


def test_get_labware_by_barcode(client, db_session, freezer):
    """GET /api/labwares/{barcode} returns the labware and its location barcode."""
    location = create_location(db_session, "Rack 1", freezer.id)
    labware = create_labware(db_session, "trac-lw-1", location.id)
    r = client.get("/api/labwares/trac-lw-1")
    assert r.status_code == 200
    assert r.json() == {
        "id": labware.id,
        "barcode": "trac-lw-1",
        "location_id": location.id,
        "location_barcode": location.barcode,
    }


def test_get_labware_at_unknown_location(client, db_session):
    """Labware with no location reports the unknown location."""
    create_labware(db_session, "trac-lw-2")
    r = client.get("/api/labwares/trac-lw-2")
    assert r.status_code == 200
    data = r.json()
    assert data["location_id"] == 999
    assert data["location_barcode"] == "lw-unknown-999"


def test_get_labware_404(client):
    """GET /api/labwares/{barcode} returns 404 for unknown barcode."""
    r = client.get("/api/labwares/nonexistent")
    assert r.status_code == 404
    assert r.json()["detail"]["error"] == "NotFoundError"
