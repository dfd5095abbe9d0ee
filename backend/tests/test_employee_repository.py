"""Single-record operations of the employee repository."""
from datetime import date

import pytest
from sqlalchemy import select

from employee_records.employee_repository import EmployeeRepository
from employee_records.models import Employee
from employee_records.schemas import EmployeeForm


@pytest.fixture
def store(session_factory) -> EmployeeRepository:
    return EmployeeRepository(session_factory)


async def _raw(session_factory, employee_id: int) -> Employee | None:
    async with session_factory() as session:
        result = await session.execute(select(Employee).where(Employee.id == employee_id))
        return result.scalar_one_or_none()


def _form(**fields) -> EmployeeForm:
    values = {
        "name": "Ada Lovelace",
        "email": "ada@acme.com",
        "address": "12 St James's Square",
        "dob": "10 Dec, 1815",
        "phone_number": "020-7946-0000",
        "profile_pic": "ada.png",
        "is_active": True,
    }
    values.update(fields)
    return EmployeeForm(**values)


@pytest.mark.asyncio
async def test_save_then_get_round_trip(store) -> None:
    employee_id = await store.save_employee(_form())

    employee = await store.get_employee(employee_id)

    assert employee_id > 0
    assert employee.name == "Ada Lovelace"
    assert employee.email == "ada@acme.com"
    assert employee.address == "12 St James's Square"
    assert employee.dob == date(1815, 12, 10)
    assert employee.phone_number == "020-7946-0000"
    assert employee.profile_pic == "ada.png"
    assert employee.is_active is True
    assert employee.is_deleted is False
    assert employee.created_date is not None
    assert employee.updated_date is None


@pytest.mark.asyncio
async def test_update_overwrites_fields_and_stamps_updated_date(store) -> None:
    employee_id = await store.save_employee(_form())

    same_id = await store.save_employee(
        _form(id=employee_id, name="Augusta Ada King", address=None, dob=None, is_active=False)
    )
    employee = await store.get_employee(employee_id)

    assert same_id == employee_id
    assert employee.name == "Augusta Ada King"
    assert employee.address is None
    assert employee.dob is None
    assert employee.is_active is False
    assert employee.updated_date is not None


@pytest.mark.asyncio
async def test_update_of_unknown_or_deleted_id_writes_nothing(store, add_employee, session_factory) -> None:
    deleted = await add_employee(is_deleted=True)

    assert await store.save_employee(_form(id=999)) is None
    assert await store.save_employee(_form(id=deleted.id)) is None

    untouched = await _raw(session_factory, deleted.id)
    assert untouched.name != "Ada Lovelace"


@pytest.mark.asyncio
async def test_get_hides_soft_deleted_and_missing(store, add_employee) -> None:
    deleted = await add_employee(is_deleted=True)

    assert await store.get_employee(deleted.id) is None
    assert await store.get_employee(12345) is None


@pytest.mark.asyncio
async def test_delete_is_soft_and_only_once(store, add_employee, session_factory) -> None:
    employee = await add_employee()

    assert await store.delete_employee(employee.id) is True
    first = await _raw(session_factory, employee.id)
    assert await store.delete_employee(employee.id) is False
    second = await _raw(session_factory, employee.id)

    assert first is not None and first.is_deleted is True
    assert first.updated_date is not None
    assert second.updated_date == first.updated_date
    assert await store.delete_employee(4242) is False


@pytest.mark.asyncio
async def test_toggle_active_returns_new_state_and_round_trips(store, add_employee) -> None:
    employee = await add_employee(is_active=True)

    assert await store.toggle_active(employee.id) is False
    assert await store.toggle_active(employee.id) is True
    assert (await store.get_employee(employee.id)).is_active is True


@pytest.mark.asyncio
async def test_toggle_treats_null_as_inactive(store, add_employee) -> None:
    employee = await add_employee(is_active=None)

    assert await store.toggle_active(employee.id) is True


@pytest.mark.asyncio
async def test_toggle_missing_or_deleted_returns_none(store, add_employee, session_factory) -> None:
    deleted = await add_employee(is_deleted=True, is_active=True)

    assert await store.toggle_active(deleted.id) is None
    assert await store.toggle_active(777) is None
    assert (await _raw(session_factory, deleted.id)).is_active is True


@pytest.mark.asyncio
async def test_email_exists_excludes_own_id(store, add_employee) -> None:
    own = await add_employee(email="a@b.com")

    assert await store.email_exists("a@b.com", exclude_id=own.id) is False
    assert await store.email_exists("a@b.com", exclude_id=0) is True


@pytest.mark.asyncio
async def test_email_exists_ignores_case_and_deleted_rows(store, add_employee) -> None:
    await add_employee(email="Grace@Acme.com")
    await add_employee(email="gone@acme.com", is_deleted=True)

    assert await store.email_exists("grace@acme.COM") is True
    assert await store.email_exists(" grace@acme.com ") is True
    assert await store.email_exists("gone@acme.com") is False
    assert await store.email_exists("nobody@acme.com") is False
