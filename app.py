"""
App assembly entry point.

Re-exports the FastAPI `app` from `employee_service.api.main` so the service
can be started with ``uvicorn app:app``.
"""

from employee_service.api.main import app  # noqa: F401
