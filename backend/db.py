"""Database engine and session for SQLite (dev) / PostgreSQL (prod)."""
from collections.abc import Generator
import logging
import os
from typing import Any, Optional

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from models import Base
import models.labware  # noqa: F401 - register with Base
import models.location  # noqa: F401
import models.location_type  # noqa: F401
from repositories.location_repository import seed_unknown_location
from utils.config import DATABASE_URL, database_url_for

LOG = logging.getLogger(__name__)

# Runtime safety: when TESTING=true, never use production DB.
if os.environ.get("TESTING") == "true":
    url = DATABASE_URL
    if "labwhere.db" in url or (":memory:" not in url and "test" not in url.lower().split("?")[0]):
        raise RuntimeError(
            "Tests must not run against production. Set TESTING_DATABASE_URL to sqlite:///:memory: "
            "(or another test URL containing :memory: or 'test')."
        )


def make_engine(database_url: str) -> Engine:
    """Create an engine; SQLite gets cross-thread access, a shared in-memory pool and foreign keys."""
    connect_args = {"check_same_thread": False} if "sqlite" in database_url else {}
    # In-memory SQLite: use one connection so all sessions share the same DB.
    engine_kw: dict[str, Any] = {"connect_args": connect_args, "echo": False}
    if "sqlite" in database_url and ":memory:" in database_url:
        engine_kw["poolclass"] = StaticPool
    engine = create_engine(database_url, **engine_kw)

    # Enable foreign keys for SQLite so FK behaviour is consistent.
    if "sqlite" in database_url:

        @event.listens_for(engine, "connect")
        def _sqlite_fk(dbapi_conn, connection_record):
            dbapi_conn.execute("PRAGMA foreign_keys=ON")

    return engine


_engine = make_engine(DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_engine)


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency: yield a DB session and close after request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(database_url: str) -> Session:
    """
    Open a database, create the LabWhere tables if missing, seed the unknown location
    (type 1, location 999) and return a session on it.
    """
    engine = make_engine(database_url)
    Base.metadata.create_all(engine)
    session = Session(bind=engine)
    seed_unknown_location(session)
    LOG.info("Initialised schema on %s", engine.url.render_as_string(hide_password=True))
    return session


def create_db(path: Optional[str], environment: str) -> str:
    """Create the SQLite database file for an environment (test, dev, prod) and return its URL."""
    if path:
        os.makedirs(path, exist_ok=True)
    database_url = database_url_for(environment, path)
    engine = make_engine(database_url)
    try:
        # SQLite creates the file on first connect.
        with engine.connect():
            pass
    finally:
        engine.dispose()
    LOG.info("Created database %s", database_url)
    return database_url
