"""
In-memory record store and its FastAPI dependency.

The store is a plain mapping plus one reader-writer lock. Both are public:
request handlers take the lock once for their whole body and operate on the
mapping through `employee_service.store.repository`.
"""
from __future__ import annotations

from typing import Dict

from starlette.requests import Request

from employee_service.store.schemas import Employee
from employee_service.utils.rwlock import ReadWriteLock


class EmployeeStore:
    def __init__(self) -> None:
        self.employees: Dict[int, Employee] = {}
        self.lock = ReadWriteLock()


def get_store(request: Request) -> EmployeeStore:
    """Dependency: the store owned by the running application."""
    return request.app.state.employee_store
