"""Unit tests: error taxonomy."""
import pytest

from labwhere_core.errors import (
    InvalidNameFormatError,
    LabwhereError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

pytestmark = pytest.mark.unit


def test_default_messages():
    """Each error kind has its own default message."""
    assert str(NotFoundError()) == "Not found"
    assert str(PersistenceError()) == "Persistence error"
    assert str(ValidationError()) == "Validation error"


def test_code_in_str_and_dict():
    """code is shown in str() and included in to_dict()."""
    e = PersistenceError("insert failed", code="IntegrityError", details={"cause": "x"})
    assert str(e) == "[IntegrityError] insert failed"
    assert e.to_dict() == {
        "error": "PersistenceError",
        "message": "insert failed",
        "code": "IntegrityError",
        "details": {"cause": "x"},
    }


def test_hierarchy():
    """All errors are LabwhereError; InvalidNameFormatError is a ValidationError."""
    assert issubclass(InvalidNameFormatError, ValidationError)
    for cls in (ValidationError, NotFoundError, PersistenceError):
        assert issubclass(cls, LabwhereError)
    assert not issubclass(NotFoundError, PersistenceError)


def test_invalid_name_format_error():
    """InvalidNameFormatError carries the rejected name."""
    e = InvalidNameFormatError("A/b")
    assert e.name == "A/b"
    assert e.code == "invalid_name_format"
    assert e.message == "Invalid name format"
