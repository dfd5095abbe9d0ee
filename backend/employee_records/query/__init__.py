"""Employee list pipeline: request descriptor, translators and shaping."""
from .descriptor import EmployeeListQuery
from .shaping import EmployeePage, EmployeeRow, format_date, shape_page, to_view
from .strategies import (
    ComposedListStrategy,
    ListStrategy,
    ServerSideListStrategy,
    build_strategy,
)

__all__ = [
    "ComposedListStrategy",
    "EmployeeListQuery",
    "EmployeePage",
    "EmployeeRow",
    "ListStrategy",
    "ServerSideListStrategy",
    "build_strategy",
    "format_date",
    "shape_page",
    "to_view",
]
