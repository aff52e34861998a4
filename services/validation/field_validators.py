# -*- coding: utf-8 -*-
"""
Field validators - pure functions checking a single field value.

Every factory here returns a callable ``validator(value) -> Optional[str]``
that yields an error message or ``None``. Validators only receive
non-empty values: deciding whether a field is required is the step
schema's job (see ``is_empty``).
"""

import math
import re
import uuid
from numbers import Number
from typing import Any, Callable, Iterable, Optional

FieldValidator = Callable[[Any], Optional[str]]

EMAIL_REGEX = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)
PHONE_REGEX = re.compile(r"^[+]?[1-9][\d]{0,15}$|^[+]?[()]?[\d\s\-()]{10,20}$")
URL_REGEX = re.compile(r"^https?://[^\s]+$")


def is_empty(value: Any) -> bool:
    """
    Check whether a value counts as "not provided".

    None, whitespace-only strings and empty collections are empty.
    Zero and False are real answers.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else str(value)


def max_length(limit: int, label: str) -> FieldValidator:
    def validate(value):
        if len(_text(value)) > limit:
            return f"{label} must be less than {limit} characters"
        return None
    return validate


def min_length(limit: int, label: str) -> FieldValidator:
    def validate(value):
        if len(_text(value)) < limit:
            return f"{label} must be at least {limit} characters"
        return None
    return validate


def pattern(regex, message: str) -> FieldValidator:
    """Require the whole (stripped) value to match ``regex``."""
    compiled = re.compile(regex) if isinstance(regex, str) else regex

    def validate(value):
        if not compiled.fullmatch(_text(value)):
            return message
        return None
    return validate


def email(message: str = "Please enter a valid email address") -> FieldValidator:
    return pattern(EMAIL_REGEX, message)


def phone(message: str = "Please enter a valid phone number") -> FieldValidator:
    return pattern(PHONE_REGEX, message)


def url(message: str = "Please enter a valid URL starting with http:// or https://") -> FieldValidator:
    return pattern(URL_REGEX, message)


def one_of(choices: Iterable[Any], message: str) -> FieldValidator:
    allowed = tuple(choices)

    def validate(value):
        if value not in allowed:
            return message
        return None
    return validate


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, Number):
        number = value
    else:
        try:
            number = float(_text(value))
        except (TypeError, ValueError):
            return None
    try:
        return number if math.isfinite(number) else None
    except TypeError:
        return None


def number_min(minimum: float, label: str) -> FieldValidator:
    def validate(value):
        number = _as_number(value)
        if number is None:
            return f"{label} must be a number"
        if number < minimum:
            return f"{label} cannot be less than {minimum}"
        return None
    return validate


def integer_range(minimum: Optional[int], maximum: Optional[int], label: str) -> FieldValidator:
    """Whole number within ``[minimum, maximum]``; either bound may be None."""
    def validate(value):
        number = _as_number(value)
        if number is None or number != int(number):
            return f"{label} must be a whole number"
        if minimum is not None and number < minimum:
            return f"{label} must be {minimum} or more"
        if maximum is not None and number > maximum:
            return f"{label} cannot exceed {maximum}"
        return None
    return validate


def uuid_value(label: str) -> FieldValidator:
    def validate(value):
        try:
            uuid.UUID(_text(value))
        except (TypeError, ValueError, AttributeError):
            return f"{label} must be a valid UUID"
        return None
    return validate


def each(validator: FieldValidator) -> FieldValidator:
    """Apply ``validator`` to every item of a list value."""
    def validate(value):
        items = value if isinstance(value, (list, tuple, set, frozenset)) else [value]
        for item in items:
            error = validator(item)
            if error:
                return error
        return None
    return validate


def compose(*validators: FieldValidator) -> FieldValidator:
    """Chain validators; the first failure wins."""
    def validate(value):
        for validator in validators:
            error = validator(value)
            if error:
                return error
        return None
    return validate
