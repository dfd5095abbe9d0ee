"""Pydantic schemas used across the backend API."""
from __future__ import annotations

import re
from datetime import date, datetime
from http import HTTPStatus
from typing import Generic, TypeVar

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator

T = TypeVar("T")

DISPLAY_DATE_FORMAT = "%d %b, %Y"
PHONE_PATTERN = re.compile(r"^[0-9-]*$")


# -----------------------------
# DataTables grid parameters
# -----------------------------


class DTSearch(BaseModel):
    """Search box state sent by the grid."""

    value: str | None = ""
    regex: bool = False


class DTColumn(BaseModel):
    """One grid column; ``name`` is the logical field used for sorting."""

    data: str | None = None
    name: str | None = None
    searchable: bool = True
    orderable: bool = True
    search: DTSearch | None = None


class DTOrder(BaseModel):
    """Sort instruction: a column index and ``asc``/``desc``."""

    column: int = 0
    dir: str | None = "asc"


class DataTableParameters(BaseModel):
    """Server-side processing request posted by the grid widget."""

    draw: int = 0
    start: int = 0
    length: int = 10
    columns: list[DTColumn] = Field(default_factory=list)
    order: list[DTOrder] = Field(default_factory=list)
    search: DTSearch | None = None


class EmployeeListRequest(DataTableParameters):
    """Grid parameters plus the employee specific filters."""

    email: str | None = None
    phone: str | None = None
    search_keyword: str | None = None
    search_column: str | None = None
    search_column_value: str | None = None


class DataTableResult(BaseModel, Generic[T]):
    """Response envelope understood by the grid widget."""

    draw: int = 0
    data: list[T] = Field(default_factory=list)
    records_filtered: int = Field(default=0, alias="recordsFiltered")
    records_total: int = Field(default=0, alias="recordsTotal")

    model_config = {"populate_by_name": True}


# -----------------------------
# Employee payloads
# -----------------------------


class EmployeeListItem(BaseModel):
    """One row of the employee grid."""

    id: int
    name: str
    email: str
    address: str | None = None
    dob: str = "N/A"
    phone_number: str | None = None
    profile_pic: str | None = None
    created_date: str = "N/A"
    is_active: bool = False
    total_records: int = 0


class EmployeeView(BaseModel):
    """Single employee as shown in the edit form."""

    id: int = 0
    name: str = ""
    email: str = ""
    address: str | None = None
    dob: str = "N/A"
    phone_number: str | None = None
    profile_pic: str | None = None
    is_active: bool = False


def _text(value) -> str:
    return "" if value is None else str(value).strip()


def parse_display_date(value: date | datetime | str | None) -> date | None:
    """Accept ``07 Jun, 2023``, ISO ``2023-06-07`` or a date object."""

    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError("Invalid date of birth")
    text = value.strip()
    if not text:
        return None
    for fmt in (DISPLAY_DATE_FORMAT, "%Y-%m-%d"):
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ValueError("Invalid date of birth")


class EmployeeForm(BaseModel):
    """Create/update payload. ``id`` 0 creates a new employee."""

    id: int = 0
    name: str | None = None
    email: str | None = None
    address: str | None = None
    dob: date | None = None
    phone_number: str | None = None
    profile_pic: str | None = None
    is_active: bool = True

    model_config = {"validate_default": True}

    @field_validator("id")
    @classmethod
    def _id_not_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("Invalid employee id")
        return value

    @field_validator("name", mode="before")
    @classmethod
    def _check_name(cls, value: str | None) -> str:
        value = _text(value)
        if not value:
            raise ValueError("Name is required")
        if len(value) > 50:
            raise ValueError("Name should not be more than 50 characters")
        return value

    @field_validator("email", mode="before")
    @classmethod
    def _check_email(cls, value: str | None) -> str:
        value = _text(value)
        if not value:
            raise ValueError("Email is required")
        if len(value) > 50:
            raise ValueError("Email should not be more than 50 characters")
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as exc:
            raise ValueError("Please enter a valid email address") from exc
        return value

    @field_validator("address", mode="before")
    @classmethod
    def _check_address(cls, value: str | None) -> str | None:
        value = _text(value)
        if len(value) > 250:
            raise ValueError("Address should not be more than 250 characters")
        return value or None

    @field_validator("dob", mode="before")
    @classmethod
    def _check_dob(cls, value):
        return parse_display_date(value)

    @field_validator("phone_number", mode="before")
    @classmethod
    def _check_phone(cls, value: str | None) -> str | None:
        value = _text(value)
        if not value:
            return None
        if not 9 <= len(value) <= 15 or not PHONE_PATTERN.match(value):
            raise ValueError("Invalid phone number")
        return value

    @field_validator("profile_pic", mode="before")
    @classmethod
    def _check_profile_pic(cls, value: str | None) -> str | None:
        value = _text(value)
        if len(value) > 200:
            raise ValueError("Profile picture path should not be more than 200 characters")
        return value or None


class EmailCheck(BaseModel):
    """Remote validation request for the email field."""

    email: str = ""
    id: int = 0


# -----------------------------
# Service results
# -----------------------------


class Responses(BaseModel, Generic[T]):
    """Outcome of a service call: payload, status and a display message."""

    data: T | None = None
    status_code: int = int(HTTPStatus.INTERNAL_SERVER_ERROR)
    message: str = ""

    @property
    def succeeded(self) -> bool:
        return self.status_code == HTTPStatus.OK
