"""Exception handlers mapping service errors onto HTTP responses.

- ValidationFailedError -> 400 validation problem, field key -> messages
- RequestValidationError -> 400 validation problem, same shape
- EmployeeNotFoundError -> 404, empty body
- unmatched routes (e.g. a non-integer id) -> 404, empty body

InvalidArgumentError has no handler and surfaces as a 500.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_pascal
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import EmployeeNotFoundError, ValidationFailedError
from app.models.employee import ValidationProblem

logger = logging.getLogger(__name__)

_LOCATIONS = ("body", "path", "query", "header", "cookie")


def register_error_handlers(app: FastAPI) -> None:
    """Register all service error handlers on the FastAPI app."""
    app.add_exception_handler(ValidationFailedError, _validation_failed_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(EmployeeNotFoundError, _not_found_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)


def validation_problem(errors: dict[str, list[str]]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ValidationProblem(errors=errors).model_dump(),
    )


async def _validation_failed_handler(request: Request, exc: ValidationFailedError) -> JSONResponse:
    logger.warning("Validation failed on %s: %s", request.url.path, ", ".join(exc.errors))
    return validation_problem(exc.errors)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: dict[str, list[str]] = defaultdict(list)
    for error in exc.errors():
        errors[error_key(error.get("loc", ()))].append(error.get("msg", "Invalid value"))
    logger.warning("Malformed request on %s: %s", request.url.path, ", ".join(errors))
    return validation_problem(dict(errors))


async def _not_found_handler(request: Request, exc: EmployeeNotFoundError) -> Response:
    logger.info("Employee %d not found (%s %s)", exc.employee_id, request.method, request.url.path)
    return Response(status_code=status.HTTP_404_NOT_FOUND)


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return await http_exception_handler(request, exc)


def error_key(loc: Sequence[Any]) -> str:
    """PascalCase key for a pydantic error location; ``$`` for the body root."""
    parts = [str(part) for part in loc if part not in _LOCATIONS and not isinstance(part, int)]
    if not parts:
        return "$"
    name = parts[-1]
    if "_" in name:
        return to_pascal(name)
    return name[:1].upper() + name[1:]
