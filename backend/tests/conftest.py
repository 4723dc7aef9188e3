from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from app.core.dependencies import get_employee_repository
from app.main import app
from app.services.employee_repository import EmployeeRepository


@pytest.fixture
def client():
    # entering the client runs the lifespan, so every test starts with an empty store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def repository():
    return EmployeeRepository()


@pytest.fixture
async def async_client(repository):
    # ASGITransport does not run the lifespan; hand the repository in directly
    app.dependency_overrides[get_employee_repository] = lambda: repository
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def create_payload():
    return {
        "firstName": "Germán",
        "lastName": "Gambarte",
        "socialSecurityNumber": "123-23-1231",
        "address1": "Av. Siempre Viva 742",
        "address2": "Piso 3",
        "city": "Córdoba",
        "state": "CBA",
        "zipCode": "5000",
        "phoneNumber": "+54 351 555-0101",
        "email": "german@example.com",
    }


@pytest.fixture
def update_payload():
    return {
        "address1": "123 Main St",
        "address2": "Suite 9",
        "city": "Springfield",
        "state": "IL",
        "zipCode": "62701",
        "phoneNumber": "555-0199",
        "email": "lorem@example.com",
    }
