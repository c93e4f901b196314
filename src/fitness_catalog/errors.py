"""Error types surfaced to callers of the catalog."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


class CatalogError(Exception):
    """Base exception for expected, typed failures."""

    code = "CATALOG_ERROR"
    status_code = 400

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(code=self.code, message=self.message, details=self.details)


class NameConflictError(CatalogError):
    """An active record of the same type already uses the name."""

    code = "NAME_CONFLICT"


class InvalidReferenceError(CatalogError):
    """One or more referenced ids are missing or deleted."""

    code = "INVALID_REFERENCE"


class InvalidRatingError(CatalogError):
    code = "INVALID_RATING"


class NotFoundError(CatalogError):
    code = "NOT_FOUND"
    status_code = 404


class DependencyConflictError(CatalogError):
    """Active dependents block a soft delete."""

    code = "DEPENDENCY_CONFLICT"
    status_code = 409


class ValidationError(CatalogError):
    """Payload shape or content is invalid."""

    code = "VALIDATION_ERROR"


class UnknownPatternError(CatalogError):
    code = "UNKNOWN_PATTERN"
    status_code = 404


class InternalError(CatalogError):
    """Unexpected failure. Never carries the underlying detail."""

    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
