"""LabWhere — FastAPI backend for tracking labware and the locations that hold it."""
import logging
import os
import subprocess
import sys

from fastapi import FastAPI

from utils.config import LOG_LEVEL, PORT

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
LOG = logging.getLogger(__name__)

from api.labwares import router as labwares_router
from api.location_types import router as location_types_router
from api.locations import router as locations_router
from api.routes import router
from api.scan import router as scan_router
from schemas.health import HealthResponse

app = FastAPI(
    title="LabWhere",
    description="Labware and location tracking backend",
    version="0.1.0",
)

# API routes under /api
app.include_router(router, prefix="/api")
app.include_router(location_types_router, prefix="/api")
app.include_router(locations_router, prefix="/api")
app.include_router(labwares_router, prefix="/api")
app.include_router(scan_router, prefix="/api")


@app.get("/api/health", response_model=HealthResponse)
def api_health() -> HealthResponse:
    """Explicit health route so /api/health is always available."""
    return HealthResponse()


@app.on_event("startup")
def startup() -> None:
    """Run DB migrations."""
    backend_dir = os.path.dirname(os.path.abspath(__file__))
    result = subprocess.run(
        [sys.executable, "-m", "alembic", "upgrade", "head"],
        cwd=backend_dir,
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        raise RuntimeError(f"Alembic upgrade failed: {result.stderr or result.stdout}")
    LOG.info("Database schema is up to date")


@app.get("/")
def root() -> dict:
    """Root redirect/info."""
    return {"service": "labwhere", "docs": "/docs", "health": "/api/health"}


if __name__ == "__main__":
    import uvicorn

    LOG.info("Server running on port: %s", PORT)
    uvicorn.run(app, host="127.0.0.1", port=PORT)
