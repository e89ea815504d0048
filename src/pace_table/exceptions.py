"""
Custom exceptions for the pace table application.

The computational core never raises for bad user input: inverted pace bounds,
missing selections and non-positive paces all produce empty or "undefined"
results. These exceptions cover the surrounding layers:
- catalog data that fails validation at import time
- lookups by key coming from the API or the CLI
- stored preferences that cannot be parsed
"""

from typing import Any, Dict, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for consistent API error responses."""

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"

    # Catalog errors
    DISTANCE_NOT_FOUND = "DISTANCE_NOT_FOUND"
    CATALOG_INVALID = "CATALOG_INVALID"

    # Preference errors
    PREFERENCE_INVALID = "PREFERENCE_INVALID"


def error_body(code: str, message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """JSON body shared by every error the API returns."""
    body: Dict[str, Any] = {"code": code, "message": message}
    if details:
        body["details"] = details
    return {"error": body}


class PaceTableError(Exception):
    """Root of the pace table errors; carries what the API needs to answer."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return error_body(self.code.value, self.message, self.details)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code.value}: {self.message})"


# ============================================================================
# Validation Errors (400)
# ============================================================================

class ValidationError(PaceTableError):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if field:
            error_details["field"] = field
        super().__init__(
            message=message,
            code=ErrorCode.VALIDATION_ERROR,
            status_code=400,
            details=error_details,
        )


class PreferenceError(ValidationError):
    """Raised when a stored or submitted preference value cannot be parsed."""

    def __init__(self, key: str, value: Any) -> None:
        super().__init__(
            message=f"Invalid value {value!r} for preference '{key}'",
            field=key,
        )
        self.code = ErrorCode.PREFERENCE_INVALID


# ============================================================================
# Not Found Errors (404)
# ============================================================================

class NotFoundError(PaceTableError):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        message = f"{resource_type} with key '{resource_id}' not found"
        error_details = details or {}
        error_details["resource_type"] = resource_type
        error_details["resource_id"] = resource_id
        super().__init__(
            message=message,
            code=ErrorCode.NOT_FOUND,
            status_code=404,
            details=error_details,
        )


class DistanceNotFoundError(NotFoundError):
    """Raised when a distance key is not in the catalog being queried."""

    def __init__(self, key: str, catalog: str = "official") -> None:
        super().__init__(
            resource_type="Distance",
            resource_id=key,
            details={"catalog": catalog},
        )
        self.code = ErrorCode.DISTANCE_NOT_FOUND


# ============================================================================
# Data Errors (500)
# ============================================================================

class CatalogValidationError(PaceTableError):
    """Raised at load time when distance catalog data is inconsistent."""

    def __init__(self, message: str, key: Optional[str] = None) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.CATALOG_INVALID,
            status_code=500,
            details={"key": key} if key else None,
        )
