"""WHERE and ORDER BY building blocks shared by both list strategies."""
from __future__ import annotations

from sqlalchemy import case, false, func
from sqlalchemy.sql.elements import ColumnElement

from ..models import Employee
from .descriptor import ASC, EmployeeListQuery
from .shaping import NOT_AVAILABLE

SORT_COLUMNS = {
    "Name": Employee.name,
    "Email": Employee.email,
    "Address": Employee.address,
    "PhoneNumber": Employee.phone_number,
    "Dob": Employee.dob,
    "CreatedDate": Employee.created_date,
}

SEARCH_COLUMNS = {
    "Name": Employee.name,
    "Email": Employee.email,
    "Address": Employee.address,
    "PhoneNumber": Employee.phone_number,
}


def order_by_clauses(query: EmployeeListQuery) -> list[ColumnElement]:
    """Resolve the requested sort, newest first when nothing usable was sent.

    The grid's direction is applied inverted: an ``ASC`` request orders
    descending and anything else orders ascending. Clients rely on this.
    """

    column = SORT_COLUMNS.get(query.sort_column or "")
    if column is None:
        return [Employee.id.desc()]
    primary = column.desc() if query.sort_order == ASC else column.asc()
    return [primary, Employee.id.asc()]


def search_text() -> ColumnElement[str]:
    """``name email address phone `` with ``N/A`` appended when dob is unset."""

    parts = [
        func.coalesce(column, "")
        for column in (Employee.name, Employee.email, Employee.address, Employee.phone_number)
    ]
    text = parts[0]
    for part in parts[1:]:
        text = text + " " + part
    return text + " " + case((Employee.dob.is_(None), NOT_AVAILABLE), else_="")


def where_clauses(query: EmployeeListQuery) -> list[ColumnElement[bool]]:
    clauses: list[ColumnElement[bool]] = [Employee.is_deleted == false()]

    keyword = query.keyword
    if keyword:
        clauses.append(search_text().contains(keyword, autoescape=True))
    if query.email:
        clauses.append(Employee.email == query.email.strip())
    if query.phone:
        clauses.append(Employee.phone_number == query.phone.strip())

    column = SEARCH_COLUMNS.get(query.search_column)
    value = query.search_column_value.strip()
    if column is not None and value:
        clauses.append(func.coalesce(column, "").contains(value, autoescape=True))
    return clauses


def page_window(query: EmployeeListQuery) -> tuple[int, int | None]:
    """Offset and limit; a negative page size means "everything"."""

    offset = max(query.page_start, 0)
    limit = query.page_size if query.page_size >= 0 else None
    return offset, limit
