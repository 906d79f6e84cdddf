"""
Custom exceptions for the registrar.
"""

from typing import Optional, Any, Dict

__all__ = [
    "RegistrarException",
    "ValidationError",
    "ResourceNotFoundError",
    "DuplicateEntityError",
    "EnrollmentError",
    "PersistenceError",
    "MalformedRecordError",
    "ConfigurationError",
]


class RegistrarException(Exception):
    """Base exception for all registrar errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ValidationError(RegistrarException):
    """Raised when data validation fails."""
    pass


class ResourceNotFoundError(RegistrarException):
    """Raised when a requested student or course is not found."""
    pass


class DuplicateEntityError(RegistrarException):
    """Raised when attempting to create a duplicate entity."""
    pass


class EnrollmentError(RegistrarException):
    """Raised when enrollment operations fail."""
    pass


class PersistenceError(RegistrarException):
    """Raised when a data or report file cannot be read or written."""
    pass


class MalformedRecordError(PersistenceError):
    """Raised by a strict load when a stored row cannot be parsed."""

    def __init__(self, message: str, path: str, line_number: int, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path
        self.line_number = line_number


class ConfigurationError(RegistrarException):
    """Raised when configuration is invalid."""
    pass
