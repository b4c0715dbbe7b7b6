"""
Custom exceptions for the gradebook.
"""

from typing import Optional, Any, Dict


class GradebookException(Exception):
    """Base exception for all gradebook errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ValidationError(GradebookException):
    """Raised when a field value violates its constraint."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        if field is not None:
            self.details.setdefault("field", field)


class AuthenticationError(GradebookException):
    """Raised when a login fails or nobody is logged in."""
    pass


class ResourceNotFoundError(GradebookException):
    """Raised when a requested entity is not found."""
    pass


class DuplicateEntityError(GradebookException):
    """Raised when attempting to save an entity whose natural key already exists."""
    pass


class ContractViolationError(GradebookException):
    """Raised when the core is called with arguments that break its call contract."""
    pass


class ConfigurationError(GradebookException):
    """Raised when configuration is invalid."""
    pass
