"""Success/failure results returned by every mutating service operation."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

SAVE_FAILED_MESSAGE = "Failed to save data. Please try again later."


class ErrorType(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    STORAGE = "storage"
    REFUSED = "refused"


def field_errors(error: ValidationError) -> dict[str, list[str]]:
    """Flatten a pydantic ValidationError into a field -> messages map.

    Nested locations are joined with dots, e.g. ``items.0.quantity``.
    """
    errors: dict[str, list[str]] = {}
    for item in error.errors():
        field = ".".join(str(part) for part in item["loc"]) or "__root__"
        errors.setdefault(field, []).append(item["msg"])
    return errors


class OperationResult(BaseModel):
    """Discriminated outcome of a create/update/delete operation."""

    success: bool
    message: str
    record: Optional[Any] = None
    errors: dict[str, list[str]] = Field(default_factory=dict)
    error_type: Optional[ErrorType] = None

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @classmethod
    def ok(cls, message: str, record: Any = None) -> "OperationResult":
        return cls(success=True, message=message, record=record)

    @classmethod
    def invalid(cls, message: str, error: ValidationError) -> "OperationResult":
        return cls(
            success=False,
            message=message,
            errors=field_errors(error),
            error_type=ErrorType.VALIDATION,
        )

    @classmethod
    def not_found(cls, message: str) -> "OperationResult":
        return cls(success=False, message=message, error_type=ErrorType.NOT_FOUND)

    @classmethod
    def refused(cls, message: str) -> "OperationResult":
        return cls(success=False, message=message, error_type=ErrorType.REFUSED)

    @classmethod
    def storage_failed(cls, message: str = SAVE_FAILED_MESSAGE) -> "OperationResult":
        return cls(success=False, message=message, error_type=ErrorType.STORAGE)

    def to_response(self) -> dict[str, Any]:
        """JSON-ready dict with the record in its stored camelCase layout."""
        record = self.record
        if isinstance(record, BaseModel):
            record = record.model_dump(mode="json", by_alias=True, exclude_none=True)
        response: dict[str, Any] = {"success": self.success, "message": self.message}
        if record is not None:
            response["record"] = record
        if self.errors:
            response["errors"] = self.errors
        if self.error_type is not None:
            response["errorType"] = self.error_type.value
        return response
