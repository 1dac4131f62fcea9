"""
FastAPI app assembly: logging, error mapping and router wiring.
"""
import logging
from typing import Optional

from fastapi import FastAPI

from employee_service.api.employees import router as employees_router
from employee_service.api.errors import register_error_handlers
from employee_service.store.memory import EmployeeStore
from employee_service.utils.runtime import log_level, log_level_name

# Configure logging
LOG_LEVEL_NAME = log_level_name()
LOG_LEVEL = log_level()
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)


def create_app(store: Optional[EmployeeStore] = None) -> FastAPI:
    """Build an app that owns ``store`` (a fresh empty one by default)."""
    app = FastAPI(
        title="Employee Records Service",
        description="In-memory CRUD API for employee records.",
        version="1.0.0",
    )
    # Avoid implicit trailing-slash redirects for predictable URLs
    app.router.redirect_slashes = False

    app.state.employee_store = store if store is not None else EmployeeStore()
    register_error_handlers(app)

    app.include_router(employees_router)
    return app


app = create_app()
