"""Employee directory model."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import uuid4

from sqlalchemy import CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wage_reports.models.base import Base, TimestampMixin
from wage_reports.reconciliation.types import Employee

if TYPE_CHECKING:
    from wage_reports.models.ledger import AdvanceEntry, AttendanceEntry, SalaryPaymentEntry


def new_id() -> str:
    return uuid4().hex


class EmployeeRecord(Base, TimestampMixin):
    """Employee with a fixed per-day wage rate."""

    __tablename__ = "employee"
    __table_args__ = (
        CheckConstraint("daily_wage >= 0", name="employee_daily_wage_nonnegative"),
    )

    employee_id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String, nullable=False)
    designation: Mapped[str] = mapped_column(String, nullable=False, default="")
    daily_wage: Mapped[Decimal] = mapped_column(nullable=False)
    contact_number: Mapped[str] = mapped_column(String, nullable=False, default="")
    photo: Mapped[str | None] = mapped_column(String, nullable=True)

    # Relationships
    attendance: Mapped[list[AttendanceEntry]] = relationship(back_populates="employee")
    advances: Mapped[list[AdvanceEntry]] = relationship(back_populates="employee")
    salary_payments: Mapped[list[SalaryPaymentEntry]] = relationship(
        back_populates="employee"
    )

    def to_domain(self) -> Employee:
        return Employee(
            id=self.employee_id,
            name=self.name,
            designation=self.designation,
            daily_wage=Decimal(self.daily_wage),
            contact_number=self.contact_number,
            photo=self.photo,
        )
