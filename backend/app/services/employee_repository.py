from __future__ import annotations

from app.core.repository import InMemoryRepository
from app.models.employee import Employee


class EmployeeRepository(InMemoryRepository[Employee]):
    """In-memory employee store. A plain ``update`` renames the employee."""

    default_update_fields = ("first_name", "last_name")
