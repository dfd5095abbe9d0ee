"""Map stored employee rows to the shapes handed to clients."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from ..models import Employee
from ..schemas import DISPLAY_DATE_FORMAT, EmployeeListItem, EmployeeView

NOT_AVAILABLE = "N/A"


@dataclass
class EmployeeRow:
    """Raw, unformatted list row as produced by a list strategy."""

    id: int
    name: str
    email: str
    address: str | None = None
    dob: date | str | None = None
    phone_number: str | None = None
    profile_pic: str | None = None
    created_date: datetime | str | None = None
    is_active: bool | None = None

    @classmethod
    def from_model(cls, employee: Employee) -> "EmployeeRow":
        return cls(
            id=employee.id,
            name=employee.name,
            email=employee.email,
            address=employee.address,
            dob=employee.dob,
            phone_number=employee.phone_number,
            profile_pic=employee.profile_pic,
            created_date=employee.created_date,
            is_active=employee.is_active,
        )

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any], keys: Mapping[str, str]) -> "EmployeeRow":
        """Build from a result row, ``keys`` maps attribute -> column label."""
        return cls(**{attr: row[label] for attr, label in keys.items()})


@dataclass
class EmployeePage:
    """One page of the grid plus the filtered total it was cut from."""

    rows: list[EmployeeListItem] = field(default_factory=list)
    total_filtered: int = 0


def format_date(value: date | datetime | str | None) -> str:
    if value is None:
        return NOT_AVAILABLE
    if isinstance(value, str):
        # Already formatted by the database.
        return value or NOT_AVAILABLE
    return value.strftime(DISPLAY_DATE_FORMAT)


def to_list_item(row: EmployeeRow, total_records: int) -> EmployeeListItem:
    return EmployeeListItem(
        id=row.id,
        name=row.name,
        email=row.email,
        address=row.address,
        dob=format_date(row.dob),
        phone_number=row.phone_number,
        profile_pic=row.profile_pic,
        created_date=format_date(row.created_date),
        is_active=bool(row.is_active),
        total_records=total_records,
    )


def shape_page(rows: Sequence[EmployeeRow], total_filtered: int) -> EmployeePage:
    """Format every row and stamp the same total on each of them."""

    return EmployeePage(
        rows=[to_list_item(row, total_filtered) for row in rows],
        total_filtered=total_filtered,
    )


def to_view(employee: Employee) -> EmployeeView:
    return EmployeeView(
        id=employee.id,
        name=employee.name,
        email=employee.email,
        address=employee.address,
        dob=format_date(employee.dob),
        phone_number=employee.phone_number,
        profile_pic=employee.profile_pic,
        is_active=bool(employee.is_active),
    )
