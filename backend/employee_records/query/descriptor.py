"""Normalised description of one employee list request."""
from __future__ import annotations

from dataclasses import dataclass

from ..schemas import DataTableParameters

ASC = "ASC"
DESC = "DESC"


@dataclass(frozen=True)
class EmployeeListQuery:
    """Paging, sorting and filtering options for a single list call.

    Built once per request and thrown away after the page is produced.
    ``sort_column``/``sort_order`` are ``None`` when the grid sent no
    ordering, which makes the translators fall back to newest-first.
    """

    page_start: int = 0
    page_size: int = 10
    search_keyword: str = ""
    sort_column: str | None = None
    sort_order: str | None = None
    email: str = ""
    phone: str = ""
    search_column: str = ""
    search_column_value: str = ""
    # Grid "data" key of the sorted column, used for the composite sort key.
    sort_data: str | None = None

    @property
    def sort_key(self) -> str | None:
        """``<column><DESC?>``, e.g. ``"nameDESC"`` or ``"email"``.

        Same form as the grid's own sort-order string; bound to the
        ``employee_page_fetched`` log event of every list call.
        """
        if self.sort_data is None:
            return None
        return self.sort_data + (DESC if self.sort_order == DESC else "")

    @property
    def keyword(self) -> str:
        return (self.search_keyword or "").strip()

    @classmethod
    def from_datatable(
        cls,
        params: DataTableParameters,
        email: str | None = None,
        phone: str | None = None,
        search_keyword: str | None = None,
        search_column: str | None = None,
        search_column_value: str | None = None,
    ) -> "EmployeeListQuery":
        """Fold grid parameters and the separately posted filters together."""

        sort_column = sort_order = sort_data = None
        if params.order:
            first = params.order[0]
            if 0 <= first.column < len(params.columns):
                column = params.columns[first.column]
                sort_column = column.name or None
                sort_data = column.data or None
                sort_order = DESC if (first.dir or "").strip().upper() == DESC else ASC

        keyword = params.search.value if params.search else ""
        if not keyword:
            keyword = search_keyword or ""

        return cls(
            page_start=params.start,
            page_size=params.length,
            search_keyword=keyword,
            sort_column=sort_column,
            sort_order=sort_order,
            email=email or "",
            phone=phone or "",
            search_column=search_column or "",
            search_column_value=search_column_value or "",
            sort_data=sort_data,
        )
