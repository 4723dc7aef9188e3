"""Validation rules for incoming employee payloads.

Each payload type maps to one validation function in ``_VALIDATORS``. The
report is keyed by the PascalCase property name (``FirstName``) while messages
use the spaced display name (``'First Name' must not be empty.``).
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_pascal

from app.core.errors import InvalidArgumentError, ValidationFailedError
from app.models.employee import CreateEmployeeRequest

_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


class ValidationResult(BaseModel):
    errors: dict[str, list[str]] = Field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(self, key: str, message: str) -> None:
        self.errors.setdefault(key, []).append(message)

    def raise_if_invalid(self) -> None:
        if not self.is_valid:
            raise ValidationFailedError(self.errors)


Rule = Callable[[Any, ValidationResult], None]


def property_key(field: str) -> str:
    return to_pascal(field)


def display_name(field: str) -> str:
    return _WORD_BOUNDARY.sub(" ", property_key(field))


def not_empty(field: str) -> Rule:
    """Fail when the field is None, empty or only whitespace."""
    key = property_key(field)
    message = f"'{display_name(field)}' must not be empty."

    def _check(payload: Any, result: ValidationResult) -> None:
        value = getattr(payload, field, None)
        if value is None or not str(value).strip():
            result.add_error(key, message)

    return _check


def _run(rules: tuple[Rule, ...], payload: Any) -> ValidationResult:
    result = ValidationResult()
    for rule in rules:
        rule(payload, result)
    return result


CREATE_EMPLOYEE_RULES: tuple[Rule, ...] = (
    not_empty("first_name"),
    not_empty("last_name"),
)


def validate_create_employee(payload: CreateEmployeeRequest) -> ValidationResult:
    return _run(CREATE_EMPLOYEE_RULES, payload)


_VALIDATORS: dict[type, Callable[[Any], ValidationResult]] = {
    CreateEmployeeRequest: validate_create_employee,
}


def get_validator(payload_type: type) -> Callable[[Any], ValidationResult]:
    try:
        return _VALIDATORS[payload_type]
    except KeyError as err:
        raise InvalidArgumentError(f"No validator found for {payload_type.__name__}") from err


def validate(payload: Any) -> ValidationResult:
    return get_validator(type(payload))(payload)
