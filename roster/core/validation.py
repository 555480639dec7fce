"""
Field validation rules shared by the entity model and the presentation layers.

Every validator takes the field name and a raw value, returns the normalized
value, and raises ``ValidationError`` when the value breaks the rule.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Any

from .enums import ValidationErrorKind
from .exceptions import ValidationError

TELEPHONE_PATTERN = re.compile(r"^0\d{9,10}$")
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", re.IGNORECASE)

MIN_SALARY = Decimal("0")
MAX_SALARY = Decimal("1000000000")
MIN_WORKING_HOURS = 0
MAX_WORKING_HOURS = 84

_TRUE_WORDS = ("y", "yes", "true", "1")
_FALSE_WORDS = ("n", "no", "false", "0")


def _label(field: str) -> str:
    return field.replace("_", " ").capitalize()


def require_text(field: str, value: Any) -> str:
    """Trim ``value``; blank or missing input is an empty field."""
    if value is None or not str(value).strip():
        raise ValidationError(field, ValidationErrorKind.EMPTY_FIELD, f"{_label(field)} cannot be empty.")
    return str(value).strip()


def optional_text(field: str, value: Any) -> str:
    """Free text: trimmed, ``None`` becomes an empty string."""
    if value is None:
        return ""
    return str(value).strip()


def validate_name(value: Any, field: str = "name") -> str:
    return require_text(field, value)


def validate_telephone(value: Any, field: str = "telephone") -> str:
    """Telephone numbers start with 0 and have 10 or 11 digits in total."""
    text = require_text(field, value)
    if not TELEPHONE_PATTERN.match(text):
        raise ValidationError(
            field, ValidationErrorKind.INVALID_FORMAT,
            "Invalid telephone format. Must start with 0 and be 10-11 digits."
        )
    return text


def validate_email(value: Any, field: str = "email") -> str:
    text = require_text(field, value)
    if not EMAIL_PATTERN.match(text):
        raise ValidationError(field, ValidationErrorKind.INVALID_FORMAT, "Invalid email format.")
    return text


def validate_salary(value: Any, field: str = "salary") -> Decimal:
    """Salaries are decimals between 0 and 1,000,000,000; numeric strings are accepted."""
    if isinstance(value, bool):
        raise ValidationError(field, ValidationErrorKind.INVALID_FORMAT, f"{_label(field)} must be a number.")
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(field, ValidationErrorKind.EMPTY_FIELD, f"{_label(field)} cannot be empty.")
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(
            field, ValidationErrorKind.INVALID_FORMAT, f"{_label(field)} must be a number."
        ) from None
    if not amount.is_finite():
        raise ValidationError(field, ValidationErrorKind.INVALID_FORMAT, f"{_label(field)} must be a number.")
    if amount < MIN_SALARY:
        raise ValidationError(field, ValidationErrorKind.OUT_OF_RANGE, f"{_label(field)} must be >= 0")
    if amount > MAX_SALARY:
        raise ValidationError(
            field, ValidationErrorKind.OUT_OF_RANGE, f"{_label(field)} must be <= {MAX_SALARY:,}"
        )
    # -0 is stored as 0.
    return amount.copy_abs() if amount.is_zero() else amount


def validate_working_hours(value: Any, field: str = "working_hours") -> int:
    """Weekly working hours, an integer between 0 and 84 inclusive."""
    if isinstance(value, bool):
        raise ValidationError(field, ValidationErrorKind.INVALID_FORMAT, "Working hours must be a whole number.")
    if isinstance(value, int):
        hours = value
    else:
        text = "" if value is None else str(value).strip()
        if not text:
            raise ValidationError(field, ValidationErrorKind.EMPTY_FIELD, "Working hours cannot be empty.")
        try:
            hours = int(text)
        except ValueError:
            raise ValidationError(
                field, ValidationErrorKind.INVALID_FORMAT, "Working hours must be a whole number."
            ) from None
    if not MIN_WORKING_HOURS <= hours <= MAX_WORKING_HOURS:
        raise ValidationError(
            field, ValidationErrorKind.OUT_OF_RANGE,
            f"Working hours must be between {MIN_WORKING_HOURS} and {MAX_WORKING_HOURS}."
        )
    return hours


def validate_flag(value: Any, field: str = "is_full_time") -> bool:
    """Booleans, or yes/no style words matched by their first letter."""
    if isinstance(value, bool):
        return value
    text = "" if value is None else str(value).strip().lower()
    if not text:
        raise ValidationError(field, ValidationErrorKind.EMPTY_FIELD, f"{_label(field)} cannot be empty.")
    if text in _TRUE_WORDS or text.startswith("y"):
        return True
    if text in _FALSE_WORDS or text.startswith("n"):
        return False
    raise ValidationError(field, ValidationErrorKind.INVALID_FORMAT, "Please enter Y or N.")
