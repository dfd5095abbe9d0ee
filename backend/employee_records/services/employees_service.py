"""
Employee service: validation and result envelopes around the repository.

Store failures never leave this layer as exceptions; they are logged and
turned into a ``500`` ``Responses``. Missing records come back as ``404``
results the caller can branch on.
"""

from __future__ import annotations

from collections.abc import Mapping
from http import HTTPStatus
from typing import Any

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from ..employee_repository import EmployeeRepository
from ..logging_config import get_logger
from ..query import EmployeeListQuery, EmployeePage, to_view
from ..schemas import EmployeeForm, EmployeeView, Responses

logger = get_logger(__name__)

GENERIC_ERROR = "Something went wrong"
NOT_FOUND = "Employee not found"
EMAIL_TAKEN = "Email address already exist"

# Errors raised when the database is unreachable or rejects a statement.
STORE_ERRORS = (SQLAlchemyError, OSError)


def validation_message(exc: ValidationError) -> str:
    """Human readable summary of a failed ``EmployeeForm`` validation."""

    messages: list[str] = []
    for error in exc.errors():
        cause = (error.get("ctx") or {}).get("error")
        message = str(cause) if cause else error["msg"]
        if message not in messages:
            messages.append(message)
    return "; ".join(messages)


class EmployeeService:
    """Business operations used by the employee routes."""

    def __init__(self, repository: EmployeeRepository) -> None:
        self.repository = repository

    async def list_employees(self, query: EmployeeListQuery) -> Responses[EmployeePage]:
        try:
            page = await self.repository.list_employees(query)
        except STORE_ERRORS:
            logger.exception("employee_list_failed", page_start=query.page_start)
            return Responses(
                data=EmployeePage(),
                status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                message=GENERIC_ERROR,
            )
        return Responses(data=page, status_code=HTTPStatus.OK)

    async def get_employee(self, employee_id: int) -> Responses[EmployeeView]:
        try:
            employee = await self.repository.get_employee(employee_id)
        except STORE_ERRORS:
            logger.exception("employee_fetch_failed", employee_id=employee_id)
            return Responses(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, message=GENERIC_ERROR)
        if employee is None:
            return Responses(status_code=HTTPStatus.NOT_FOUND, message=NOT_FOUND)
        return Responses(data=to_view(employee), status_code=HTTPStatus.OK)

    async def save_employee(self, payload: EmployeeForm | Mapping[str, Any]) -> Responses[int]:
        """Validate and create (``id`` 0) or update an employee."""

        try:
            form = payload if isinstance(payload, EmployeeForm) else EmployeeForm.model_validate(payload)
        except ValidationError as exc:
            return Responses(data=0, status_code=HTTPStatus.BAD_REQUEST, message=validation_message(exc))

        try:
            if await self.repository.email_exists(form.email, form.id):
                return Responses(data=form.id, status_code=HTTPStatus.CONFLICT, message=EMAIL_TAKEN)
            employee_id = await self.repository.save_employee(form)
        except STORE_ERRORS:
            logger.exception("employee_save_failed", employee_id=form.id)
            return Responses(data=form.id, status_code=HTTPStatus.INTERNAL_SERVER_ERROR, message=GENERIC_ERROR)

        if employee_id is None:
            return Responses(data=form.id, status_code=HTTPStatus.NOT_FOUND, message=NOT_FOUND)

        created = form.id == 0
        logger.info("employee_saved", employee_id=employee_id, created=created)
        message = "Employee created successfully" if created else "Employee updated successfully"
        return Responses(data=employee_id, status_code=HTTPStatus.OK, message=message)

    async def delete_employee(self, employee_id: int) -> Responses[bool]:
        try:
            deleted = await self.repository.delete_employee(employee_id)
        except STORE_ERRORS:
            logger.exception("employee_delete_failed", employee_id=employee_id)
            return Responses(data=False, status_code=HTTPStatus.INTERNAL_SERVER_ERROR, message=GENERIC_ERROR)
        if not deleted:
            return Responses(data=False, status_code=HTTPStatus.NOT_FOUND, message=NOT_FOUND)
        logger.info("employee_deleted", employee_id=employee_id)
        return Responses(data=True, status_code=HTTPStatus.OK, message="Employee has been deleted successfully")

    async def toggle_active(self, employee_id: int) -> Responses[bool]:
        try:
            state = await self.repository.toggle_active(employee_id)
        except STORE_ERRORS:
            logger.exception("employee_toggle_failed", employee_id=employee_id)
            return Responses(data=False, status_code=HTTPStatus.INTERNAL_SERVER_ERROR, message=GENERIC_ERROR)
        if state is None:
            return Responses(data=False, status_code=HTTPStatus.NOT_FOUND, message=NOT_FOUND)
        logger.info("employee_active_toggled", employee_id=employee_id, is_active=state)
        word = "activated" if state else "de-activated"
        return Responses(data=state, status_code=HTTPStatus.OK, message=f"Employee has been {word} successfully")

    async def email_exists(self, email: str, exclude_id: int = 0) -> Responses[bool]:
        try:
            exists = await self.repository.email_exists(email, exclude_id)
        except STORE_ERRORS:
            logger.exception("employee_email_check_failed", exclude_id=exclude_id)
            return Responses(data=False, status_code=HTTPStatus.INTERNAL_SERVER_ERROR, message=GENERIC_ERROR)
        return Responses(data=exists, status_code=HTTPStatus.OK)
