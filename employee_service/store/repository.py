"""
Employee store operations.

Implements list/get/create/replace/delete against an `EmployeeStore`. None of
these functions lock; callers hold `store.lock` (shared for reads, exclusive
for writes) around the call.

Two behaviours are kept on purpose because clients can observe them:

* New identifiers are ``len(store.employees) + 1``. After a deletion this can equal an
  identifier still in use, and the new record replaces the old one.
* Listing scans identifiers ``1..len(store.employees)``. After a deletion, records with
  identifiers above the current size are not reachable from any page.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from employee_service.store.memory import EmployeeStore
from employee_service.store.schemas import Employee

logger = logging.getLogger(__name__)


def next_employee_id(store: EmployeeStore) -> int:
    return len(store.employees) + 1


def list_employees(store: EmployeeStore, page: int = 1, limit: int = 10) -> List[Employee]:
    """Return one page of employees ordered by id."""
    offset = (page - 1) * limit
    employees: List[Employee] = []
    for employee_id in range(1, len(store.employees) + 1):
        employee = store.employees.get(employee_id)
        if employee is None:
            continue
        if offset > 0:
            offset -= 1
            continue
        employees.append(employee)
        if len(employees) >= limit:
            break
    employees.sort(key=lambda e: e.id)
    return employees


def get_employee(store: EmployeeStore, employee_id: int) -> Optional[Employee]:
    return store.employees.get(employee_id)


def create_employee(store: EmployeeStore, employee: Employee, employee_id: Optional[int] = None) -> Employee:
    """Store ``employee`` under a newly assigned id and return the stored record.

    ``employee_id`` lets the caller pass an id computed earlier under the same
    exclusive lock; by default it is assigned from the current size.
    """
    if employee_id is None:
        employee_id = next_employee_id(store)
    if employee_id in store.employees:
        logger.debug("create_employee: id %s already in use, replacing", employee_id)
    db_employee = employee.model_copy(update={"id": employee_id})
    store.employees[employee_id] = db_employee
    logger.debug("create_employee: id=%s", employee_id)
    return db_employee


def replace_employee(store: EmployeeStore, employee_id: int, employee: Employee) -> Optional[Employee]:
    """Replace the record at ``employee_id`` wholesale; None if absent.

    The replacement is stored as given, including its own ``id`` field.
    """
    if employee_id not in store.employees:
        return None
    store.employees[employee_id] = employee
    logger.debug("replace_employee: key=%s body_id=%s", employee_id, employee.id)
    return employee


def delete_employee(store: EmployeeStore, employee_id: int) -> bool:
    if employee_id not in store.employees:
        return False
    del store.employees[employee_id]
    logger.debug("delete_employee: id=%s", employee_id)
    return True
