"""
Custom exceptions for the roster.
"""

from typing import Optional, Any, Dict

from .enums import ValidationErrorKind


class RosterException(Exception):
    """Base exception for all roster errors."""
    
    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ValidationError(RosterException):
    """Raised when a field value violates its rule.

    ``field`` names the offending field, ``kind`` classifies the failure and
    ``rule`` describes the rule in words.
    """

    def __init__(self, field: str, kind: ValidationErrorKind, rule: str):
        super().__init__(rule, error_code=kind.value, details={"field": field})
        self.field = field
        self.kind = kind
        self.rule = rule

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "kind": self.kind.value, "message": self.rule}


class UnknownFieldError(ValidationError):
    """Raised when a field does not exist or cannot be edited."""

    def __init__(self, field: str, rule: Optional[str] = None):
        super().__init__(field, ValidationErrorKind.UNKNOWN_FIELD, rule or f"Unknown or read-only field: {field}")


class ResourceNotFoundError(RosterException):
    """Raised when a requested record is not found."""
    pass


class DuplicateEntityError(RosterException):
    """Raised when attempting to add a record that already has an id."""
    pass


class ConfigurationError(RosterException):
    """Raised when configuration is invalid."""
    pass
