"""Error taxonomy for the LabWhere core: validation, not-found and persistence failures."""
from typing import Any, Optional


class LabwhereError(Exception):
    """Base exception for LabWhere core errors."""

    default_message = "An error occurred in LabWhere"

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message or self.default_message
        self.code = code
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert the error to a dictionary (used for API error bodies)."""
        error_dict: dict[str, Any] = {
            "error": self.__class__.__name__,
            "message": self.message,
        }
        if self.code:
            error_dict["code"] = self.code
        if self.details:
            error_dict["details"] = self.details
        return error_dict


class ValidationError(LabwhereError):
    """Malformed input, raised before any I/O."""

    default_message = "Validation error"


class InvalidNameFormatError(ValidationError):
    """Location name is empty, longer than 60 characters or has characters outside the allowed set."""

    default_message = "Invalid name format"

    def __init__(self, name: str, message: Optional[str] = None) -> None:
        self.name = name
        super().__init__(message, code="invalid_name_format", details={"name": name})


class NotFoundError(LabwhereError):
    """A lookup by key returned no rows."""

    default_message = "Not found"


class PersistenceError(LabwhereError):
    """Any other store failure: constraint violation, connectivity, malformed statement, dangling reference."""

    default_message = "Persistence error"
