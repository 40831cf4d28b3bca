# Set test environment before any application or db imports.
import os

os.environ["TESTING"] = "true"
os.environ["TESTING_DATABASE_URL"] = "sqlite:///:memory:"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event
from sqlalchemy.orm import Session

from db import SessionLocal, get_db
from main import app
from models import Base
from models.labware import Labware  # noqa: F401 - register with Base
from models.location import Location  # noqa: F401
from models.location_type import LocationType  # noqa: F401
from repositories.location_repository import seed_unknown_location
from repositories.location_type_repository import create_location_type


def _get_engine():
    """Engine used by the app (in-memory when TESTING=true)."""
    return SessionLocal.kw["bind"]


@pytest.fixture(scope="session")
def engine():
    """One in-memory engine per test run; create tables and the unknown location once."""
    eng = _get_engine()
    # pysqlite does not emit BEGIN itself, so savepoint release would commit for real;
    # let SQLAlchemy manage BEGIN so each test's outer transaction can be rolled back.
    @event.listens_for(eng, "connect")
    def _disable_pysqlite_begin(dbapi_conn, connection_record):
        dbapi_conn.isolation_level = None

    @event.listens_for(eng, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    eng.pool.dispose()  # reconnect so the connect hook applies to the shared in-memory connection
    Base.metadata.create_all(eng)
    with Session(bind=eng) as session:
        seed_unknown_location(session)
    return eng


@pytest.fixture
def db_session(engine):
    """Function-scoped session; each test runs in a transaction that is rolled back."""
    connection = engine.connect()
    trans = connection.begin()
    session = Session(bind=connection)
    session.begin_nested()
    try:
        yield session
    finally:
        session.close()
        if trans.is_active:
            trans.rollback()
        connection.close()


@pytest.fixture
def freezer(db_session):
    """A 'Freezer' location type."""
    return create_location_type(db_session, "Freezer")


def _override_get_db(session):
    """Return a generator that yields the given session (for dependency override)."""
    def override():
        yield session
    return override


@pytest.fixture
def client(db_session):
    """API test client; overrides get_db to use the test db_session, cleared on teardown."""
    app.dependency_overrides[get_db] = _override_get_db(db_session)
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()


def pytest_sessionfinish(session, exitstatus):
    """Remove any temporary test DB files created during the run."""
    import glob
    for pattern in ["test_*.db", "test.db"]:
        for path in glob.glob(pattern):
            try:
                os.remove(path)
            except OSError:
                pass
