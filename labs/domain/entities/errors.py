"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
The presentation layer maps each class to an HTTP status and a response key.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a record cannot be found (or is not visible to the caller)."""

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        if identifier is None:
            message = f"{resource} not found"
        else:
            message = f"{resource} with ID {identifier} not found"
        self.resource = resource
        super().__init__(message, details)


class ValidationError(DomainError):
    """Raised when input violates a business rule."""


class DuplicateError(DomainError):
    """Raised when a unique value (email, role name, project code) is taken."""


class TenancyError(DomainError):
    """Raised when the session does not belong to the addressed company or user."""

    def __init__(
        self,
        message: str = "Session does not belong to the requested company",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)


class AuthenticationError(DomainError):
    """Raised for missing, invalid or expired credentials."""

    def __init__(
        self,
        message: str = "Invalid credentials",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)


class OperationError(DomainError):
    """Raised when a persistence operation fails."""
