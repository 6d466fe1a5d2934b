"""
Error taxonomy for the campus map.

None of these are meant to reach the user as a crash: the screen controller
converts every CampusMapError into a status message.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes."""

    PERMISSION_DENIED = "PERMISSION_DENIED"
    LOCATION_UNAVAILABLE = "LOCATION_UNAVAILABLE"
    STORE_SEED_FAILED = "STORE_SEED_FAILED"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    SCHEMA_MISMATCH = "SCHEMA_MISMATCH"


class CampusMapError(Exception):
    """Base exception for the campus map."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class PermissionDenied(CampusMapError):
    """The user declined foreground location access."""

    def __init__(self, message: str = "Location permission denied", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.PERMISSION_DENIED,
            details=details
        )


class LocationUnavailable(CampusMapError):
    """The one-shot fetch or the position stream failed."""

    def __init__(self, message: str = "Location unavailable", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.LOCATION_UNAVAILABLE,
            details=details
        )


class StoreSeedFailure(CampusMapError):
    """The seeding transaction failed and was rolled back."""

    def __init__(self, message: str = "Failed to seed place store", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.STORE_SEED_FAILED,
            details=details
        )


class StoreUnavailable(CampusMapError):
    """The store file could not be opened or read."""

    def __init__(self, message: str = "Place store unavailable", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.STORE_UNAVAILABLE,
            details=details
        )
