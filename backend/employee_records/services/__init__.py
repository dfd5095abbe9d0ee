"""Service layer."""
from .employees_service import EmployeeService

__all__ = ["EmployeeService"]
