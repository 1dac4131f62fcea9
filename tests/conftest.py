import pytest
from fastapi.testclient import TestClient

from employee_service.api.main import create_app
from employee_service.store.memory import EmployeeStore
from employee_service.store.schemas import Employee


@pytest.fixture
def store():
    return EmployeeStore()


@pytest.fixture
def client(store):
    return TestClient(create_app(store))


@pytest.fixture
def seed(store):
    """Insert employees with ids ``1..count`` directly into the store."""
    def _seed(count: int):
        for i in range(1, count + 1):
            store.employees[i] = Employee(
                id=i,
                name=f"Employee{i}",
                position=f"Position{i}",
                salary=float(i * 1000),
            )
        return store
    return _seed
