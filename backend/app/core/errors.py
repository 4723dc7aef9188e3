"""Error kinds raised by the repository, the validators and the handlers."""

from __future__ import annotations


class EmployeeApiError(Exception):
    """Base class for all errors of this service."""


class InvalidArgumentError(EmployeeApiError, ValueError):
    """A collaborator was called with a missing or unusable argument.

    Programmer error: never mapped to a response.
    """


class ValidationFailedError(EmployeeApiError):
    """A payload broke one or more validation rules."""

    def __init__(self, errors: dict[str, list[str]]) -> None:
        super().__init__(f"Validation failed for: {', '.join(errors)}")
        self.errors = errors


class EmployeeNotFoundError(EmployeeApiError):
    def __init__(self, employee_id: int) -> None:
        super().__init__(f"Employee {employee_id} not found")
        self.employee_id = employee_id
