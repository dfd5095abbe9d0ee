"""Interchangeable ways of turning a list query into one page of rows.

``ServerSideListStrategy`` lets the database do filtering, ordering, paging
and counting in a single round trip, either through a stored procedure or
through an equivalent windowed ``SELECT``. ``ComposedListStrategy`` builds
the query with the ORM, counts the filtered set and then applies the page
window. Both must return the same rows and total for the same query.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod

from sqlalchemy import func, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Employee
from .descriptor import EmployeeListQuery
from .filters import order_by_clauses, page_window, where_clauses
from .shaping import EmployeeRow

_PROCEDURE_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$")

# EmployeeRow attribute -> column label returned by the stored procedure.
PROCEDURE_COLUMNS = {
    "id": "Id",
    "name": "Name",
    "email": "Email",
    "address": "Address",
    "dob": "Dob",
    "phone_number": "PhoneNumber",
    "profile_pic": "ProfilePic",
    "created_date": "CreatedDate",
    "is_active": "IsActive",
}
PROCEDURE_TOTAL_COLUMN = "TotalRecords"

ROW_COLUMNS = {attr: attr for attr in PROCEDURE_COLUMNS}


class ListStrategy(ABC):
    """Produce ``(rows, total_filtered)`` for one list query."""

    name: str = ""

    @abstractmethod
    async def fetch_page(
        self, session: AsyncSession, query: EmployeeListQuery
    ) -> tuple[list[EmployeeRow], int]:
        raise NotImplementedError


class ComposedListStrategy(ListStrategy):
    name = "composed"

    async def fetch_page(self, session, query):
        stmt = select(Employee).where(*where_clauses(query))

        # Count the filtered set before the page window is applied.
        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = (await session.execute(count_stmt)).scalar_one()

        offset, limit = page_window(query)
        stmt = stmt.order_by(*order_by_clauses(query)).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await session.execute(stmt)
        rows = [EmployeeRow.from_model(employee) for employee in result.scalars()]
        return rows, total


class ServerSideListStrategy(ListStrategy):
    name = "server"

    def __init__(self, procedure: str = "") -> None:
        procedure = procedure.strip()
        if procedure and not _PROCEDURE_NAME.match(procedure):
            raise ValueError(f"Invalid stored procedure name: {procedure!r}")
        self.procedure = procedure

    async def fetch_page(self, session, query):
        offset, limit = page_window(query)
        rows, total = await self._run(session, query, offset, limit)
        if not rows and (offset > 0 or limit == 0):
            # An empty window (past the end, or zero rows asked for) carries no
            # total; read it back from the first row of the same result set.
            _, total = await self._run(session, query, 0, 1)
        return rows, total

    async def _run(self, session, query, offset, limit):
        if self.procedure:
            return await self._run_procedure(session, query, offset, limit)
        return await self._run_statement(session, query, offset, limit)

    async def _run_statement(self, session, query, offset, limit):
        stmt = (
            select(
                Employee.id,
                Employee.name,
                Employee.email,
                Employee.address,
                Employee.dob,
                Employee.phone_number,
                Employee.profile_pic,
                Employee.created_date,
                Employee.is_active,
                func.count().over().label("total_records"),
            )
            .where(*where_clauses(query))
            .order_by(*order_by_clauses(query))
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await session.execute(stmt)
        records = result.mappings().all()
        rows = [EmployeeRow.from_mapping(record, ROW_COLUMNS) for record in records]
        total = records[0]["total_records"] if records else 0
        return rows, total

    async def _run_procedure(self, session, query, offset, limit):
        stmt = text(
            f"EXEC {self.procedure} :PageStart, :PageSize, :SearchKeyword, "
            ":SortColumn, :SortOrder, :Email, :PhoneNumber, :SearchColumn, "
            ":SearchColumnValue"
        )
        params = {
            "PageStart": offset,
            "PageSize": -1 if limit is None else limit,
            "SearchKeyword": query.keyword,
            "SortColumn": query.sort_column or "",
            "SortOrder": query.sort_order or "",
            "Email": query.email,
            "PhoneNumber": query.phone,
            "SearchColumn": query.search_column,
            "SearchColumnValue": query.search_column_value,
        }
        result = await session.execute(stmt, params)
        records = result.mappings().all()
        rows = [EmployeeRow.from_mapping(record, PROCEDURE_COLUMNS) for record in records]
        total = records[0][PROCEDURE_TOTAL_COLUMN] if records else 0
        return rows, total


def build_strategy(name: str, procedure: str = "") -> ListStrategy:
    """Strategy instance for a configured name (``server`` or ``composed``)."""

    if name == ServerSideListStrategy.name:
        return ServerSideListStrategy(procedure)
    if name == ComposedListStrategy.name:
        return ComposedListStrategy()
    raise ValueError(f"Unknown list strategy: {name!r}")
