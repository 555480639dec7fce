"""
Enumerations and constants for the roster.
"""

from enum import Enum


class RoleType(Enum):
    """Discriminant of a person record."""
    TEACHER = 1
    ADMIN = 2
    STUDENT = 3

    @property
    def tag(self) -> str:
        """Upper-case tag used when rendering a record."""
        return self.name

    @classmethod
    def parse(cls, value) -> "RoleType":
        """Resolve a role from an enum, its number or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        text = str(value).strip()
        if text.isdigit():
            return cls(int(text))
        try:
            return cls[text.upper()]
        except KeyError:
            raise ValueError(f"Unknown role: {value!r}") from None


class ValidationErrorKind(Enum):
    """Kinds of field validation failures."""
    EMPTY_FIELD = "empty_field"
    INVALID_FORMAT = "invalid_format"
    OUT_OF_RANGE = "out_of_range"
    UNKNOWN_FIELD = "unknown_field"


class AuditAction(Enum):
    """Mutations recorded in the service log."""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
