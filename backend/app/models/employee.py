"""Employee entity and the request/response payloads of the employees resource."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for models exchanged as camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Entity(CamelModel):
    """Anything a repository stores: carries a server-assigned integer id."""

    id: int = 0


class Employee(Entity):
    first_name: str
    last_name: str
    social_security_number: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    phone_number: str | None = None
    email: str | None = None


# Fields a PUT /employees/{id} payload overwrites.
CONTACT_FIELDS: tuple[str, ...] = (
    "address1",
    "address2",
    "city",
    "state",
    "zip_code",
    "phone_number",
    "email",
)


class CreateEmployeeRequest(CamelModel):
    """Body of POST /employees. Emptiness of names is judged by the validator."""

    first_name: str | None = None
    last_name: str | None = None
    social_security_number: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    phone_number: str | None = None
    email: str | None = None


class UpdateEmployeeRequest(CamelModel):
    """Body of PUT /employees/{id}."""

    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    phone_number: str | None = None
    email: str | None = None


class GetEmployeeResponse(CamelModel):
    first_name: str
    last_name: str
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    phone_number: str | None = None
    email: str | None = None

    @classmethod
    def from_employee(cls, employee: Employee) -> GetEmployeeResponse:
        return cls(
            first_name=employee.first_name,
            last_name=employee.last_name,
            address1=employee.address1,
            address2=employee.address2,
            city=employee.city,
            state=employee.state,
            zip_code=employee.zip_code,
            phone_number=employee.phone_number,
            email=employee.email,
        )


class ValidationProblem(BaseModel):
    """400 body for rejected payloads, field key -> messages."""

    type: str = "https://tools.ietf.org/html/rfc9110#section-15.5.1"
    title: str = "One or more validation errors occurred."
    status: int = 400
    errors: dict[str, list[str]]
