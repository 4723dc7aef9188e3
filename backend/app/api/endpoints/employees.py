from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response, status

from app.core.dependencies import get_employee_repository
from app.core.errors import EmployeeNotFoundError
from app.models.employee import (
    CONTACT_FIELDS,
    CreateEmployeeRequest,
    Employee,
    GetEmployeeResponse,
    UpdateEmployeeRequest,
    ValidationProblem,
)
from app.services.employee_repository import EmployeeRepository
from app.services.employee_validator import validate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "No employee with this id"}}


@router.get("", response_model=list[GetEmployeeResponse])
async def list_employees(
    repository: EmployeeRepository = Depends(get_employee_repository),  # noqa: B008
):
    return [GetEmployeeResponse.from_employee(employee) for employee in repository.get_all()]


@router.get("/{employee_id:int}", response_model=GetEmployeeResponse, responses=_NOT_FOUND)
async def get_employee(
    employee_id: int,
    repository: EmployeeRepository = Depends(get_employee_repository),  # noqa: B008
):
    employee = repository.get_by_id(employee_id)
    if employee is None:
        raise EmployeeNotFoundError(employee_id)

    return GetEmployeeResponse.from_employee(employee)


@router.post(
    "",
    response_model=CreateEmployeeRequest,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ValidationProblem}},
)
async def create_employee(
    request: CreateEmployeeRequest,
    response: Response,
    repository: EmployeeRepository = Depends(get_employee_repository),  # noqa: B008
):
    validate(request).raise_if_invalid()

    employee = repository.create(Employee.model_validate(request.model_dump()))
    logger.info("Created employee id=%d", employee.id)

    response.headers["Location"] = f"/employees/{employee.id}"
    # echo the payload, not the stored entity: the body carries no id
    return request


@router.put("/{employee_id:int}", response_model=Employee, responses=_NOT_FOUND)
async def update_employee(
    employee_id: int,
    request: UpdateEmployeeRequest,
    repository: EmployeeRepository = Depends(get_employee_repository),  # noqa: B008
):
    # Repository.update raises on unknown ids; report not-found before reaching it.
    existing = repository.get_by_id(employee_id)
    if existing is None:
        raise EmployeeNotFoundError(employee_id)

    changes = existing.model_copy(update=request.model_dump(include=set(CONTACT_FIELDS)))
    employee = repository.update(changes, fields=CONTACT_FIELDS)
    logger.info("Updated employee id=%d", employee.id)
    return employee
