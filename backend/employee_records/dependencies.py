"""Reusable FastAPI dependencies."""
from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .config import Settings, get_settings
from .database import AsyncSessionLocal
from .employee_repository import EmployeeRepository
from .query import ListStrategy, build_strategy
from .services import EmployeeService


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the application engine."""
    return AsyncSessionLocal


def get_list_strategy(settings: Settings = Depends(get_settings)) -> ListStrategy:
    """List strategy selected by ``EMPLOYEE_LIST_STRATEGY``."""
    return build_strategy(settings.list_strategy, settings.list_procedure)


def get_employee_repository(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
    strategy: ListStrategy = Depends(get_list_strategy),
) -> EmployeeRepository:
    return EmployeeRepository(session_factory, strategy)


def get_employee_service(
    repository: EmployeeRepository = Depends(get_employee_repository),
) -> EmployeeService:
    return EmployeeService(repository)
