from __future__ import annotations

import pytest

from app.core.errors import InvalidArgumentError, ValidationFailedError
from app.models.employee import CreateEmployeeRequest, UpdateEmployeeRequest
from app.services.employee_validator import (
    ValidationResult,
    display_name,
    get_validator,
    property_key,
    validate,
    validate_create_employee,
)


def test_valid_payload():
    result = validate_create_employee(CreateEmployeeRequest(first_name="Ada", last_name="Lovelace"))
    assert result.is_valid
    assert result.errors == {}


def test_empty_payload_reports_both_names():
    result = validate_create_employee(CreateEmployeeRequest())

    assert not result.is_valid
    assert result.errors == {
        "FirstName": ["'First Name' must not be empty."],
        "LastName": ["'Last Name' must not be empty."],
    }


@pytest.mark.parametrize("blank", ["", " ", "\t\n"])
def test_blank_first_name_is_rejected(blank):
    result = validate_create_employee(CreateEmployeeRequest(first_name=blank, last_name="Lovelace"))

    assert list(result.errors) == ["FirstName"]
    assert result.errors["FirstName"] == ["'First Name' must not be empty."]


def test_blank_last_name_is_rejected():
    result = validate_create_employee(CreateEmployeeRequest(first_name="Ada", last_name="  "))
    assert result.errors == {"LastName": ["'Last Name' must not be empty."]}


def test_optional_fields_are_not_validated():
    payload = CreateEmployeeRequest(first_name="Ada", last_name="Lovelace", email="not-an-email", zip_code="??")
    assert validate_create_employee(payload).is_valid


def test_key_and_display_forms():
    assert property_key("first_name") == "FirstName"
    assert display_name("first_name") == "First Name"
    assert property_key("social_security_number") == "SocialSecurityNumber"
    assert display_name("social_security_number") == "Social Security Number"


def test_messages_accumulate_per_key():
    result = ValidationResult()
    result.add_error("FirstName", "one")
    result.add_error("FirstName", "two")
    assert result.errors == {"FirstName": ["one", "two"]}


def test_raise_if_invalid():
    result = validate(CreateEmployeeRequest(last_name="Lovelace"))

    with pytest.raises(ValidationFailedError) as exc_info:
        result.raise_if_invalid()
    assert exc_info.value.errors == {"FirstName": ["'First Name' must not be empty."]}


def test_registry_resolves_create_validator():
    assert get_validator(CreateEmployeeRequest) is validate_create_employee


def test_registry_has_no_update_validator():
    with pytest.raises(InvalidArgumentError, match="No validator found for UpdateEmployeeRequest"):
        validate(UpdateEmployeeRequest())
