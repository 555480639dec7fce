"""
Core module containing the validated person model and its contracts.
"""

from .entities import *
from .interfaces import *
from .exceptions import *
from .enums import *

__all__ = [
    # Entities
    "Person",
    "Teacher",
    "Admin",
    "Student",
    "FieldUpdate",
    "create_person",
    
    # Interfaces
    "Renderable",
    "Repository",
    
    # Enums
    "RoleType",
    "ValidationErrorKind",
    "AuditAction",
    
    # Exceptions
    "RosterException",
    "ValidationError",
    "UnknownFieldError",
    "ResourceNotFoundError",
    "DuplicateEntityError",
    "ConfigurationError",
]
