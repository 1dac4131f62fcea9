"""
Employee API endpoints.

List/get/create/update/delete for employee records. Endpoints are plain
`def` functions so each request runs on its own threadpool worker; each one
holds the store lock for its entire body, decoding and encoding included.
"""
from typing import Optional

from fastapi import APIRouter, Depends
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse

from employee_service.api.errors import (
    INVALID_EMPLOYEE_ID,
    INVALID_REQUEST_PAYLOAD,
    EmployeeNotFoundError,
    MalformedInputError,
)
from employee_service.store import repository
from employee_service.store.memory import EmployeeStore, get_store
from employee_service.store.schemas import Employee, decode_employee
from employee_service.utils.params import pagination, parse_int

router = APIRouter(tags=["employees"])


async def read_body(request: Request) -> bytes:
    """Dependency: raw request body, decoded later under the store lock."""
    return await request.body()


def _decode_employee(body: bytes) -> Employee:
    try:
        return decode_employee(body)
    except ValueError:
        raise MalformedInputError(INVALID_REQUEST_PAYLOAD)


def _parse_employee_id(raw: str) -> int:
    employee_id = parse_int(raw)
    if employee_id is None:
        raise MalformedInputError(INVALID_EMPLOYEE_ID)
    return employee_id


@router.get("/employees")
def list_employees_endpoint(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    store: EmployeeStore = Depends(get_store),
):
    page_num, page_size = pagination(page, limit)
    with store.lock.read():
        employees = repository.list_employees(store, page=page_num, limit=page_size)
        return JSONResponse([e.model_dump() for e in employees])


@router.get("/employee/{employee_id}")
def get_employee_endpoint(employee_id: str, store: EmployeeStore = Depends(get_store)):
    with store.lock.read():
        db_employee = repository.get_employee(store, _parse_employee_id(employee_id))
        if db_employee is None:
            raise EmployeeNotFoundError()
        return JSONResponse(db_employee.model_dump())


@router.post("/employee")
def create_employee_endpoint(
    body: bytes = Depends(read_body),
    store: EmployeeStore = Depends(get_store),
):
    with store.lock.write():
        employee_id = repository.next_employee_id(store)
        employee = _decode_employee(body)
        created = repository.create_employee(store, employee, employee_id=employee_id)
        return JSONResponse(created.model_dump())


@router.put("/employee/{employee_id}")
def update_employee_endpoint(
    employee_id: str,
    body: bytes = Depends(read_body),
    store: EmployeeStore = Depends(get_store),
):
    with store.lock.write():
        # Body errors take precedence over a bad path id.
        employee = _decode_employee(body)
        updated = repository.replace_employee(store, _parse_employee_id(employee_id), employee)
        if updated is None:
            raise EmployeeNotFoundError()
        return JSONResponse(updated.model_dump())


@router.delete("/employee/{employee_id}")
def delete_employee_endpoint(employee_id: str, store: EmployeeStore = Depends(get_store)):
    with store.lock.write():
        parsed_id = _parse_employee_id(employee_id)
        if not repository.delete_employee(store, parsed_id):
            raise EmployeeNotFoundError()
        return PlainTextResponse(f"Employee with ID {parsed_id} deleted")
