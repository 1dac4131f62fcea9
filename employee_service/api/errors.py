"""
API error types and their plain-text response mapping.
"""
from fastapi import FastAPI, status
from starlette.requests import Request
from starlette.responses import PlainTextResponse

INVALID_EMPLOYEE_ID = "Invalid employee ID"
INVALID_REQUEST_PAYLOAD = "Invalid request payload"
EMPLOYEE_NOT_FOUND = "Employee not found"


class EmployeeServiceError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MalformedInputError(EmployeeServiceError):
    """Request body or path identifier could not be parsed."""

    status_code = status.HTTP_400_BAD_REQUEST


class EmployeeNotFoundError(EmployeeServiceError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = EMPLOYEE_NOT_FOUND):
        super().__init__(message)


async def employee_service_error_handler(request: Request, exc: EmployeeServiceError):
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EmployeeServiceError, employee_service_error_handler)
