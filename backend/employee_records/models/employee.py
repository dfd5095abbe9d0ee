"""Employee record persisted by the service."""
from datetime import date

from sqlalchemy import Boolean, Date, Index, Integer, String, false, true
from sqlalchemy.orm import Mapped, mapped_column

from .base import AuditMixin, Base


class Employee(AuditMixin, Base):
    """A single employee. Rows are soft deleted through ``is_deleted``."""

    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(50), nullable=False)
    address: Mapped[str | None] = mapped_column(String(250), nullable=True)
    dob: Mapped[date | None] = mapped_column(Date, nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(15), nullable=True)
    profile_pic: Mapped[str | None] = mapped_column(String(200), nullable=True)
    is_active: Mapped[bool | None] = mapped_column(
        Boolean, nullable=True, default=True, server_default=true()
    )
    is_deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )

    __table_args__ = (
        Index("ix_employees_email", "email"),
        Index("ix_employees_is_deleted_id", "is_deleted", "id"),
    )

    def __repr__(self) -> str:
        return f"Employee(id={self.id!r}, email={self.email!r})"
