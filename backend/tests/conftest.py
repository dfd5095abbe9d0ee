"""Test fixtures for the backend."""
from collections.abc import Awaitable, Callable
from datetime import date

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from employee_records import models
from employee_records.config import Settings
from employee_records.database import create_engine, create_session_factory
from employee_records.dependencies import get_list_strategy, get_session_factory
from employee_records.employee_repository import EmployeeRepository
from employee_records.main import app
from employee_records.models import Employee
from employee_records.query import ComposedListStrategy, ServerSideListStrategy

AddEmployee = Callable[..., Awaitable[Employee]]


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    """Fresh SQLite database per test, schema created up front."""

    settings = Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'test_backend.db'}")
    engine = create_engine(settings)
    async with engine.begin() as conn:
        await conn.run_sync(models.Base.metadata.create_all)
    yield create_session_factory(engine)
    await engine.dispose()


@pytest.fixture(
    params=[ServerSideListStrategy, ComposedListStrategy],
    ids=["server", "composed"],
)
def strategy(request):
    """Every list test runs once per translation strategy."""
    return request.param()


@pytest.fixture
def repository(session_factory, strategy) -> EmployeeRepository:
    return EmployeeRepository(session_factory, strategy)


@pytest.fixture
def add_employee(session_factory) -> AddEmployee:
    """Insert a row directly, bypassing the repository."""

    counter = {"n": 0}

    async def _add(**fields) -> Employee:
        counter["n"] += 1
        n = counter["n"]
        values = {
            "name": f"Employee {n:02d}",
            "email": f"employee{n:02d}@acme.com",
            "address": f"{n} Mill Lane",
            "dob": date(1990, 1, 1),
            "phone_number": f"555-0000{n:02d}",
        }
        values.update(fields)
        async with session_factory() as session:
            employee = Employee(**values)
            session.add(employee)
            await session.commit()
            return employee

    return _add


@pytest_asyncio.fixture
async def client(session_factory, strategy) -> AsyncClient:
    """HTTP client for the app, wired to the per-test database."""

    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_list_strategy] = lambda: strategy
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()
