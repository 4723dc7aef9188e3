from __future__ import annotations

from fastapi import HTTPException, Request, status

from app.services.employee_repository import EmployeeRepository


def get_employee_repository(request: Request) -> EmployeeRepository:
    repository: EmployeeRepository | None = getattr(request.app.state, "employee_repository", None)
    if repository is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Employee repository not initialized",
        )
    return repository
