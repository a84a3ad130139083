# 📄 File: app/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines all the special error types our Plant Care app uses to communicate
# what went wrong in a clear, organized way instead of generic error messages.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and proper serialization for API responses and error handling.
# 🔗 Dependencies:
# FastAPI HTTPException and status constants
# 🔄 Connected Modules / Calls From:
# Care management domain services, application handlers, API exception handlers

from typing import Any, Dict, Optional
from fastapi import HTTPException, status


class PlantCareException(Exception):
    """
    Base exception class for Plant Care Application.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code
            }
        }


# =============================================================================
# VALIDATION & DATA EXCEPTIONS
# =============================================================================

class ValidationError(PlantCareException):
    """
    Exception raised for data validation failures.
    Used when input data doesn't meet validation requirements.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        error_code: str = "VALIDATION_ERROR"
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        if constraint:
            details["constraint"] = constraint

        super().__init__(
            message=message,
            status_code=422,
            details=details,
            error_code=error_code
        )


class NotFoundError(PlantCareException):
    """
    Exception raised when requested resource is not found.
    Used for missing entities, files, endpoints, etc.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        error_code: str = "NOT_FOUND"
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code=error_code
        )


# =============================================================================
# PLANT CARE SPECIFIC EXCEPTIONS
# =============================================================================

class InvalidConfigError(ValidationError):
    """
    Exception raised for a malformed reminder configuration.
    Used for bad custom intervals, weekdays, time strings or timezones.
    """

    def __init__(
        self,
        message: str = "Invalid reminder configuration",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            field=field,
            value=value,
            constraint="reminder_config",
            details=details,
            error_code="INVALID_CONFIG"
        )


class InvalidTimestampError(ValidationError):
    """
    Exception raised for a care log dated in the future or before the
    plant was acquired.
    """

    def __init__(
        self,
        message: str = "Invalid care log timestamp",
        plant_instance_id: Optional[str] = None,
        performed_at: Optional[Any] = None,
        reason: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if plant_instance_id:
            details["plant_instance_id"] = plant_instance_id
        if reason:
            details["reason"] = reason

        super().__init__(
            message=message,
            field="performed_at",
            value=performed_at,
            details=details,
            error_code="INVALID_TIMESTAMP"
        )


class UnknownEntityError(NotFoundError):
    """
    Exception raised when a plant instance or catalog entry referenced
    by the caller does not exist.
    """

    def __init__(
        self,
        entity_type: str,
        entity_id: str,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not message:
            message = f"Unknown {entity_type.replace('_', ' ')}: {entity_id}"

        super().__init__(
            message=message,
            resource_type=entity_type,
            resource_id=entity_id,
            details=details,
            error_code="UNKNOWN_ENTITY"
        )


# =============================================================================
# EXCEPTION UTILITIES
# =============================================================================

def exception_to_dict(exception: Exception) -> Dict[str, Any]:
    """
    Convert any exception to dictionary format.

    Args:
        exception: Exception to convert

    Returns:
        Dict: Exception data as dictionary
    """
    if isinstance(exception, PlantCareException):
        return exception.to_dict()

    return {
        "error": {
            "code": exception.__class__.__name__.upper(),
            "message": str(exception),
            "details": {},
            "status_code": 500
        }
    }


def is_client_error(exception: Exception) -> bool:
    """
    Check if exception represents a client error (4xx).

    Args:
        exception: Exception to check

    Returns:
        bool: True if client error, False otherwise
    """
    if isinstance(exception, PlantCareException):
        return 400 <= exception.status_code < 500

    if isinstance(exception, HTTPException):
        return 400 <= exception.status_code < 500

    return False
