"""Serve the employee API: ``python -m employee_service``."""
import logging

import uvicorn

from employee_service.api.main import app
from employee_service.utils.runtime import HOST, PORT, log_level

logger = logging.getLogger("employee_service.server")


def run_server() -> None:
    logger.info("Server listening on port %s...", PORT)
    uvicorn.run(app, host=HOST, port=PORT, log_level=log_level())


if __name__ == "__main__":
    run_server()
