"""Map core errors to HTTP errors."""
from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError

from labwhere_core.errors import LabwhereError, NotFoundError, PersistenceError, ValidationError


def http_error(e: LabwhereError) -> HTTPException:
    """ValidationError -> 422, NotFoundError -> 404, PersistenceError -> 409 (integrity) or 500."""
    if isinstance(e, ValidationError):
        code = 422  # Unprocessable Content
    elif isinstance(e, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(e, PersistenceError) and isinstance(e.__cause__, IntegrityError):
        code = status.HTTP_409_CONFLICT
    else:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return HTTPException(status_code=code, detail=e.to_dict())
