"""Translate SQLAlchemy failures into PersistenceError and roll back the session."""
import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from labwhere_core.errors import LabwhereError, PersistenceError

LOG = logging.getLogger(__name__)


@contextmanager
def store_errors(session: Session, action: str) -> Iterator[None]:
    """
    Wrap a unit of work. SQLAlchemyError becomes PersistenceError (original kept as __cause__);
    LabwhereError raised inside the block propagates unchanged. Either way the session is rolled back.
    """
    try:
        yield
    except SQLAlchemyError as e:
        session.rollback()
        LOG.error("%s failed: %s", action, e)
        raise PersistenceError(
            f"{action} failed",
            code=type(e).__name__,
            details={"cause": str(getattr(e, "orig", None) or e)},
        ) from e
    except LabwhereError:
        session.rollback()
        raise
