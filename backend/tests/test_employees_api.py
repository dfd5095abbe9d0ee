"""HTTP flow through the FastAPI app."""
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from employee_records.database import get_session
from employee_records.dependencies import get_employee_service
from employee_records.employee_repository import EmployeeRepository
from employee_records.main import app
from employee_records.services import EmployeeService

GRID = {
    "draw": 3,
    "start": 0,
    "length": 10,
    "columns": [
        {"data": None, "name": "SrNo", "orderable": False},
        {"data": "name", "name": "Name"},
        {"data": "email", "name": "Email"},
    ],
    "order": [{"column": 1, "dir": "desc"}],
    "search": {"value": "", "regex": False},
}


async def _create(client, **fields) -> int:
    payload = {
        "name": "Ada Lovelace",
        "email": "ada@acme.com",
        "address": "12 St James's Square",
        "dob": "10 Dec, 1815",
        "phone_number": "020-7946-0000",
    }
    payload.update(fields)
    res = await client.post("/employees", json=payload)
    assert res.status_code == 200, res.text
    return res.json()["data"]


@pytest.mark.asyncio
async def test_employee_flow(client) -> None:
    ada = await _create(client)
    grace = await _create(client, name="Grace Hopper", email="grace@acme.com", dob=None)

    # grid
    res = await client.post("/employees/list", json=GRID)
    assert res.status_code == 200
    body = res.json()
    assert body["draw"] == 3
    assert body["recordsFiltered"] == 2
    assert body["recordsTotal"] == 2
    assert [row["name"] for row in body["data"]] == ["Ada Lovelace", "Grace Hopper"]
    assert body["data"][0]["dob"] == "10 Dec, 1815"
    assert body["data"][1]["dob"] == "N/A"
    assert body["data"][0]["total_records"] == 2

    # read back
    res = await client.get(f"/employees/{ada}")
    assert res.status_code == 200
    assert res.json()["data"]["email"] == "ada@acme.com"
    assert res.json()["data"]["is_active"] is True

    # update
    res = await client.post(
        "/employees", json={"id": ada, "name": "Augusta Ada King", "email": "ada@acme.com"}
    )
    assert res.status_code == 200
    assert res.json()["message"] == "Employee updated successfully"

    # duplicate email
    res = await client.post("/employees", json={"id": grace, "name": "Grace", "email": "ADA@acme.com"})
    assert res.status_code == 409
    assert res.json()["message"] == "Email address already exist"

    # toggle twice
    res = await client.post(f"/employees/{ada}/active")
    assert res.json()["data"] is False
    assert res.json()["message"] == "Employee has been de-activated successfully"
    res = await client.post(f"/employees/{ada}/active")
    assert res.json()["data"] is True

    # remote email validation
    res = await client.post("/employees/is-email-available", json={"email": "ada@acme.com", "id": ada})
    assert res.json() is True
    res = await client.post("/employees/is-email-available", json={"email": "ada@acme.com", "id": 0})
    assert res.json() is False

    # soft delete
    res = await client.post(f"/employees/{ada}/delete")
    assert res.status_code == 200
    assert res.json()["message"] == "Employee has been deleted successfully"
    res = await client.get(f"/employees/{ada}")
    assert res.status_code == 404
    res = await client.post(f"/employees/{ada}/delete")
    assert res.status_code == 404

    res = await client.post("/employees/list", json=GRID)
    assert [row["id"] for row in res.json()["data"]] == [grace]
    res = await client.post("/employees/is-email-available", json={"email": "ada@acme.com"})
    assert res.json() is True


@pytest.mark.asyncio
async def test_invalid_payload_is_rejected_with_messages(client) -> None:
    res = await client.post("/employees", json={"email": "nope", "phone_number": "12ab"})

    assert res.status_code == 400
    message = res.json()["message"]
    assert "Name is required" in message
    assert "Please enter a valid email address" in message
    assert "Invalid phone number" in message


@pytest.mark.asyncio
async def test_grid_filters_and_paging(client) -> None:
    for n in range(1, 8):
        await _create(
            client,
            name=f"Person {n}",
            email=f"person{n}@acme.com",
            address="Mill Lane" if n % 2 else "High Road",
        )

    res = await client.post(
        "/employees/list",
        json={**GRID, "start": 2, "length": 2, "search_keyword": "Mill"},
    )
    body = res.json()

    assert body["recordsFiltered"] == 4
    assert body["recordsTotal"] == 2
    assert [row["name"] for row in body["data"]] == ["Person 5", "Person 7"]

    res = await client.post("/employees/list", json={**GRID, "email": "person3@acme.com"})
    assert [row["name"] for row in res.json()["data"]] == ["Person 3"]


@pytest.mark.asyncio
async def test_unknown_employee(client) -> None:
    assert (await client.get("/employees/404")).status_code == 404
    assert (await client.post("/employees/404/active")).status_code == 404
    res = await client.post("/employees", json={"id": 404, "name": "Ghost", "email": "ghost@acme.com"})
    assert res.status_code == 404


@pytest.mark.asyncio
async def test_health(client) -> None:
    res = await client.get("/health")

    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_ready(client, session_factory) -> None:
    async def _session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = _session
    res = await client.get("/ready")

    assert res.status_code == 200
    assert res.json() == {"status": "ok", "database": "ok"}


@pytest.mark.asyncio
async def test_email_check_reports_store_outage(client) -> None:
    repository = AsyncMock(spec=EmployeeRepository)
    repository.email_exists.side_effect = OperationalError("SELECT 1", {}, ConnectionRefusedError())
    app.dependency_overrides[get_employee_service] = lambda: EmployeeService(repository)

    res = await client.post("/employees/is-email-available", json={"email": "ada@acme.com"})

    assert res.status_code == 500
    assert res.json() is False
