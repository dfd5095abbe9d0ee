"""
Employee repository: every data access the service layer needs.

Each call opens its own session from the injected factory and closes it
before returning. Soft-deleted rows are invisible to all of them.
"""
from __future__ import annotations

from sqlalchemy import false, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .logging_config import get_logger
from .models import Employee
from .query import EmployeeListQuery, EmployeePage, ListStrategy, ServerSideListStrategy, shape_page
from .schemas import EmployeeForm

logger = get_logger(__name__)


class EmployeeRepository:
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        strategy: ListStrategy | None = None,
    ) -> None:
        self._session_factory = session_factory
        self.strategy = strategy or ServerSideListStrategy()

    async def list_employees(self, query: EmployeeListQuery) -> EmployeePage:
        """Return one shaped page plus the total number of matching employees."""

        async with self._session_factory() as session:
            rows, total = await self.strategy.fetch_page(session, query)
        logger.debug(
            "employee_page_fetched",
            strategy=self.strategy.name,
            sort=query.sort_key,
            rows=len(rows),
            total=total,
        )
        return shape_page(rows, total)

    async def get_employee(self, employee_id: int) -> Employee | None:
        async with self._session_factory() as session:
            return await _find_active(session, employee_id)

    async def save_employee(self, form: EmployeeForm) -> int | None:
        """Insert when ``form.id`` is 0, otherwise overwrite the stored record.

        Returns the employee id, or ``None`` when the id to update does not
        exist (or was deleted). Email uniqueness is checked by the caller.
        """

        async with self._session_factory() as session:
            if form.id == 0:
                employee = Employee()
                session.add(employee)
            else:
                employee = await _find_active(session, form.id)
                if employee is None:
                    return None
                employee.touch()

            employee.name = form.name
            employee.email = form.email
            employee.address = form.address
            employee.dob = form.dob
            employee.phone_number = form.phone_number
            employee.profile_pic = form.profile_pic
            employee.is_active = form.is_active

            await session.commit()
            return employee.id

    async def delete_employee(self, employee_id: int) -> bool:
        async with self._session_factory() as session:
            employee = await _find_active(session, employee_id)
            if employee is None:
                return False
            employee.is_deleted = True
            employee.touch()
            await session.commit()
            return True

    async def toggle_active(self, employee_id: int) -> bool | None:
        """Flip the active flag and return the new value (``None`` if missing)."""

        async with self._session_factory() as session:
            employee = await _find_active(session, employee_id)
            if employee is None:
                return None
            employee.is_active = not bool(employee.is_active)
            employee.touch()
            await session.commit()
            return employee.is_active

    async def email_exists(self, email: str, exclude_id: int = 0) -> bool:
        """Case-insensitive check against every other non-deleted employee."""

        async with self._session_factory() as session:
            result = await session.execute(
                select(Employee.id)
                .where(
                    func.lower(Employee.email) == (email or "").strip().lower(),
                    Employee.is_deleted == false(),
                    Employee.id != exclude_id,
                )
                .limit(1)
            )
            return result.scalar_one_or_none() is not None


async def _find_active(session: AsyncSession, employee_id: int) -> Employee | None:
    result = await session.execute(
        select(Employee).where(Employee.id == employee_id, Employee.is_deleted == false())
    )
    return result.scalar_one_or_none()
