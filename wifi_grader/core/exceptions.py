"""Custom exceptions for WiFi Grader.

The scoring core never raises; these are raised by the collaborators around
it (acquisition, configuration, report export).
"""

from typing import Any, Dict, Optional


class WifiGraderError(Exception):
    """Base exception for all WiFi Grader errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause


class ScanError(WifiGraderError):
    """Raised when network observations cannot be acquired."""
    pass


class ConfigurationError(WifiGraderError):
    """Raised when configuration is invalid or missing."""
    pass


class DataValidationError(WifiGraderError):
    """Raised when an upstream network record is malformed."""
    pass


class StorageError(WifiGraderError):
    """Raised when a report cannot be written."""
    pass
