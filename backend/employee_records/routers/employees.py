"""Employee endpoints for the FastAPI backend."""
from typing import Any

from fastapi import APIRouter, Body, Depends, Response

from ..dependencies import get_employee_service
from ..query import EmployeeListQuery
from ..schemas import (
    DataTableResult,
    EmailCheck,
    EmployeeListItem,
    EmployeeListRequest,
    EmployeeView,
    Responses,
)
from ..services import EmployeeService

router = APIRouter(prefix="/employees", tags=["employees"])


@router.post("/list", response_model=DataTableResult[EmployeeListItem])
async def list_employees(
    payload: EmployeeListRequest,
    response: Response,
    service: EmployeeService = Depends(get_employee_service),
) -> DataTableResult[EmployeeListItem]:
    """Server-side processing endpoint for the employee grid."""

    query = EmployeeListQuery.from_datatable(
        payload,
        email=payload.email,
        phone=payload.phone,
        search_keyword=payload.search_keyword,
        search_column=payload.search_column,
        search_column_value=payload.search_column_value,
    )
    result = await service.list_employees(query)
    response.status_code = result.status_code

    page = result.data
    return DataTableResult[EmployeeListItem](
        draw=payload.draw,
        data=page.rows,
        records_filtered=page.total_filtered,
        # Rows on this page, which is what the grid has always been sent.
        records_total=len(page.rows),
    )


@router.get("/{employee_id}", response_model=Responses[EmployeeView])
async def get_employee(
    employee_id: int,
    response: Response,
    service: EmployeeService = Depends(get_employee_service),
) -> Responses[EmployeeView]:
    """Return one employee for the edit form."""

    result = await service.get_employee(employee_id)
    response.status_code = result.status_code
    return result


@router.post("", response_model=Responses[int])
async def save_employee(
    response: Response,
    payload: dict[str, Any] = Body(...),
    service: EmployeeService = Depends(get_employee_service),
) -> Responses[int]:
    """Create (``id`` 0) or update an employee."""

    result = await service.save_employee(payload)
    response.status_code = result.status_code
    return result


@router.post("/{employee_id}/delete", response_model=Responses[bool])
async def delete_employee(
    employee_id: int,
    response: Response,
    service: EmployeeService = Depends(get_employee_service),
) -> Responses[bool]:
    """Soft delete an employee."""

    result = await service.delete_employee(employee_id)
    response.status_code = result.status_code
    return result


@router.post("/{employee_id}/active", response_model=Responses[bool])
async def toggle_active(
    employee_id: int,
    response: Response,
    service: EmployeeService = Depends(get_employee_service),
) -> Responses[bool]:
    """Flip the active flag; ``data`` holds the new state."""

    result = await service.toggle_active(employee_id)
    response.status_code = result.status_code
    return result


@router.post("/is-email-available")
async def is_email_available(
    payload: EmailCheck,
    response: Response,
    service: EmployeeService = Depends(get_employee_service),
) -> bool:
    """Remote form validation: ``true`` when no other employee uses the email.

    A store failure answers ``false`` with a 500 status so the form can tell
    an outage apart from a taken address.
    """

    result = await service.email_exists(payload.email, payload.id)
    response.status_code = result.status_code
    return result.succeeded and not result.data
