import os

# Keep the application engine off the on-disk development database
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import date
from itertools import count
from typing import Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.db import get_session
from app.main import app
from app.models import Department, Employee

_employee_numbers = count(1000)


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(engine):
    def get_session_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def make_department(session):
    """Insert a department row directly, bypassing service checks."""

    def _make(name: str, parent: Optional[Department] = None, **kwargs) -> Department:
        department = Department(
            name=name,
            parent_id=parent.id if parent else None,
            **kwargs,
        )
        session.add(department)
        session.commit()
        session.refresh(department)
        return department

    return _make


@pytest.fixture
def make_employee(session):
    def _make(
        first_name: str,
        last_name: str,
        department: Optional[Department] = None,
        **kwargs,
    ) -> Employee:
        employee = Employee(
            employee_id=str(next(_employee_numbers)),
            first_name=first_name,
            last_name=last_name,
            email=f"{first_name}.{last_name}@example.com".lower(),
            hire_date=date(2024, 1, 15),
            position=kwargs.pop("position", "Engineer"),
            department_id=department.id if department else None,
            department=department.name if department else None,
            **kwargs,
        )
        session.add(employee)
        session.commit()
        session.refresh(employee)
        return employee

    return _make
