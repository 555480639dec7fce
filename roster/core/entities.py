"""
Core entities for the roster with a small inheritance hierarchy.

A ``Person`` carries the shared identity and contact fields; ``Teacher``,
``Admin`` and ``Student`` add role-specific attributes. Every field is
validated when the record is constructed and again on every mutation, so an
instance never holds an invalid value.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from .enums import RoleType
from .exceptions import DuplicateEntityError, UnknownFieldError, ValidationError
from .interfaces import Renderable
from .validation import (
    optional_text, validate_email, validate_flag, validate_name,
    validate_salary, validate_telephone, validate_working_hours,
)


def validate_subject(value: Any, field: str = "subject") -> str:
    return optional_text(field, value)


def format_currency(amount: Decimal) -> str:
    """Render a salary as ``$1,500.00``."""
    return f"${amount:,.2f}"


@dataclass
class FieldUpdate:
    """Result of a single field mutation."""
    success: bool
    field: str
    old_value: Any = None
    new_value: Any = None
    error: Optional[ValidationError] = None

    @property
    def message(self) -> str:
        if self.error is not None:
            return self.error.message
        return f"{self.field} updated"


class Person(Renderable, ABC):
    """Abstract base class for all persons in the roster."""

    # Field name -> validator. Order is the editing order.
    _FIELDS: Dict[str, Callable[..., Any]] = {
        "name": validate_name,
        "telephone": validate_telephone,
        "email": validate_email,
    }

    def __init__(self, name: str, telephone: str, email: str, role: RoleType, **fields):
        values = self._validate_all(dict(name=name, telephone=telephone, email=email, **fields))
        self._id: Optional[int] = None
        self._role = role
        for key, value in values.items():
            setattr(self, f"_{key}", value)

    @classmethod
    def _validate_all(cls, values: Dict[str, Any]) -> Dict[str, Any]:
        """Validate every field before anything is stored."""
        validated = {}
        for key, value in values.items():
            if key not in cls._FIELDS:
                raise UnknownFieldError(key)
            validated[key] = cls._FIELDS[key](value, key)
        return validated

    def _set(self, field: str, value: Any) -> None:
        normalized = self._FIELDS[field](value, field)
        setattr(self, f"_{field}", normalized)

    @property
    def id(self) -> Optional[int]:
        """Store-assigned id, ``None`` until the record is added."""
        return self._id

    def _assign_id(self, entity_id: int) -> None:
        if self._id is not None:
            raise DuplicateEntityError(
                f"{self.__class__.__name__} already has id {self._id}",
                error_code="id_already_assigned",
                details={"id": self._id},
            )
        self._id = entity_id

    @property
    def role(self) -> RoleType:
        return self._role

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._set("name", value)

    @property
    def telephone(self) -> str:
        return self._telephone

    @telephone.setter
    def telephone(self, value: str) -> None:
        self._set("telephone", value)

    @property
    def email(self) -> str:
        return self._email

    @email.setter
    def email(self, value: str) -> None:
        self._set("email", value)

    @classmethod
    def editable_fields(cls) -> Tuple[str, ...]:
        """Names of the fields a caller may change, in editing order."""
        return tuple(cls._FIELDS)

    def set_field(self, field: str, value: Any) -> FieldUpdate:
        """Validate and store one field.

        Never raises for bad input: the outcome is reported in the returned
        ``FieldUpdate`` and on failure the previous value is kept.
        """
        if field not in self._FIELDS:
            return FieldUpdate(success=False, field=field, error=UnknownFieldError(field))

        old_value = getattr(self, f"_{field}")
        try:
            self._set(field, value)
        except ValidationError as e:
            return FieldUpdate(success=False, field=field, old_value=old_value, new_value=old_value, error=e)
        return FieldUpdate(success=True, field=field, old_value=old_value, new_value=getattr(self, f"_{field}"))

    def update_fields(self, changes: Mapping[str, Any]) -> List[FieldUpdate]:
        """Apply several changes in order; blank values keep the current value."""
        results = []
        for field, value in changes.items():
            if value is None or (isinstance(value, str) and not value.strip()):
                continue
            results.append(self.set_field(field, value))
        return results

    def _header(self) -> str:
        shown_id = "-" if self._id is None else self._id
        return f"[{shown_id}] {self._role.tag} | {self._name} | {self._telephone} | {self._email}"

    @abstractmethod
    def render(self) -> str:
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Convert the record to a dictionary."""
        data = {'id': self._id, 'role': self._role.name.lower()}
        for field in self._FIELDS:
            data[field] = getattr(self, f"_{field}")
        return data

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id}, name={self._name!r})"


class Teacher(Person):
    """Teacher with a salary and two subjects."""

    _FIELDS = {
        **Person._FIELDS,
        "salary": validate_salary,
        "subject1": validate_subject,
        "subject2": validate_subject,
    }

    def __init__(self, name: str, telephone: str, email: str, salary, subject1: str = "", subject2: str = ""):
        super().__init__(name, telephone, email, RoleType.TEACHER,
                         salary=salary, subject1=subject1, subject2=subject2)

    @property
    def salary(self) -> Decimal:
        return self._salary

    @salary.setter
    def salary(self, value) -> None:
        self._set("salary", value)

    @property
    def subject1(self) -> str:
        return self._subject1

    @subject1.setter
    def subject1(self, value: str) -> None:
        self._set("subject1", value)

    @property
    def subject2(self) -> str:
        return self._subject2

    @subject2.setter
    def subject2(self, value: str) -> None:
        self._set("subject2", value)

    def render(self) -> str:
        return (f"{self._header()} | Salary: {format_currency(self._salary)} | "
                f"Subjects: {self._subject1}, {self._subject2}")


class Admin(Person):
    """Administrator with a salary, employment type and weekly hours."""

    _FIELDS = {
        **Person._FIELDS,
        "salary": validate_salary,
        "is_full_time": validate_flag,
        "working_hours": validate_working_hours,
    }

    def __init__(self, name: str, telephone: str, email: str, salary, is_full_time: bool, working_hours: int):
        super().__init__(name, telephone, email, RoleType.ADMIN,
                         salary=salary, is_full_time=is_full_time, working_hours=working_hours)

    @property
    def salary(self) -> Decimal:
        return self._salary

    @salary.setter
    def salary(self, value) -> None:
        self._set("salary", value)

    @property
    def is_full_time(self) -> bool:
        return self._is_full_time

    @is_full_time.setter
    def is_full_time(self, value: bool) -> None:
        self._set("is_full_time", value)

    @property
    def working_hours(self) -> int:
        return self._working_hours

    @working_hours.setter
    def working_hours(self, value: int) -> None:
        self._set("working_hours", value)

    def render(self) -> str:
        employment = "Full-time" if self._is_full_time else "Part-time"
        return (f"{self._header()} | Salary: {format_currency(self._salary)} | "
                f"{employment} | {self._working_hours}h/week")


class Student(Person):
    """Student enrolled in up to three subjects."""

    _FIELDS = {
        **Person._FIELDS,
        "subject1": validate_subject,
        "subject2": validate_subject,
        "subject3": validate_subject,
    }

    def __init__(self, name: str, telephone: str, email: str,
                 subject1: str = "", subject2: str = "", subject3: str = ""):
        super().__init__(name, telephone, email, RoleType.STUDENT,
                         subject1=subject1, subject2=subject2, subject3=subject3)

    @property
    def subject1(self) -> str:
        return self._subject1

    @subject1.setter
    def subject1(self, value: str) -> None:
        self._set("subject1", value)

    @property
    def subject2(self) -> str:
        return self._subject2

    @subject2.setter
    def subject2(self, value: str) -> None:
        self._set("subject2", value)

    @property
    def subject3(self) -> str:
        return self._subject3

    @subject3.setter
    def subject3(self, value: str) -> None:
        self._set("subject3", value)

    def render(self) -> str:
        return f"{self._header()} | Subjects: {self._subject1}, {self._subject2}, {self._subject3}"


PERSON_TYPES: Dict[RoleType, type] = {
    RoleType.TEACHER: Teacher,
    RoleType.ADMIN: Admin,
    RoleType.STUDENT: Student,
}


def create_person(role, **fields) -> Person:
    """Construct the variant for ``role`` from keyword fields.

    Raises ``ValidationError`` for any invalid field and ``UnknownFieldError``
    for a field the variant does not have.
    """
    person_type = PERSON_TYPES[RoleType.parse(role)]
    unknown = [key for key in fields if key not in person_type._FIELDS]
    if unknown:
        raise UnknownFieldError(unknown[0])
    # Missing fields are validated as blank input.
    return person_type(**{key: fields.get(key) for key in person_type._FIELDS})
