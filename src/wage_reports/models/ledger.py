"""Attendance, advance and salary payment ledgers."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, CheckConstraint, Date, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wage_reports.models.base import Base, TimestampMixin
from wage_reports.models.employee import new_id
from wage_reports.reconciliation.types import (
    Advance,
    AttendanceRecord,
    CustomType,
    SalaryPayment,
)

if TYPE_CHECKING:
    from wage_reports.models.employee import EmployeeRecord


class AttendanceEntry(Base, TimestampMixin):
    """One attendance day with an optional custom adjustment."""

    __tablename__ = "attendance_record"
    __table_args__ = (
        CheckConstraint(
            "custom_type IS NULL OR custom_type IN ('ot', 'half-day', 'custom')",
            name="attendance_custom_type_valid",
        ),
        Index("ix_attendance_employee_date", "employee_id", "work_date"),
    )

    attendance_id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_id)
    employee_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("employee.employee_id", ondelete="CASCADE"),
        nullable=False,
    )
    work_date: Mapped[date] = mapped_column(Date, nullable=False)
    present: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    custom_type: Mapped[str | None] = mapped_column(String, nullable=True)
    custom_amount: Mapped[Decimal | None] = mapped_column(nullable=True)

    employee: Mapped[EmployeeRecord] = relationship(back_populates="attendance")

    def to_domain(self) -> AttendanceRecord:
        return AttendanceRecord(
            id=self.attendance_id,
            employee_id=self.employee_id,
            date=self.work_date,
            present=bool(self.present),
            custom_type=CustomType(self.custom_type) if self.custom_type else None,
            custom_amount=(
                Decimal(self.custom_amount) if self.custom_amount is not None else None
            ),
        )


class AdvanceEntry(Base, TimestampMixin):
    """Cash advanced to an employee."""

    __tablename__ = "advance"
    __table_args__ = (
        CheckConstraint("amount > 0", name="advance_amount_positive"),
        Index("ix_advance_employee_date", "employee_id", "advance_date"),
    )

    advance_id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_id)
    employee_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("employee.employee_id", ondelete="CASCADE"),
        nullable=False,
    )
    advance_date: Mapped[date] = mapped_column(Date, nullable=False)
    amount: Mapped[Decimal] = mapped_column(nullable=False)
    description: Mapped[str] = mapped_column(String, nullable=False, default="")

    employee: Mapped[EmployeeRecord] = relationship(back_populates="advances")

    def to_domain(self) -> Advance:
        return Advance(
            id=self.advance_id,
            employee_id=self.employee_id,
            date=self.advance_date,
            amount=Decimal(self.amount),
            description=self.description,
        )


class SalaryPaymentEntry(Base, TimestampMixin):
    """Salary already paid out to an employee."""

    __tablename__ = "salary_payment"
    __table_args__ = (
        CheckConstraint("amount > 0", name="salary_payment_amount_positive"),
        Index("ix_salary_payment_employee_date", "employee_id", "payment_date"),
    )

    payment_id: Mapped[str] = mapped_column(String(64), primary_key=True, default=new_id)
    employee_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("employee.employee_id", ondelete="CASCADE"),
        nullable=False,
    )
    payment_date: Mapped[date] = mapped_column(Date, nullable=False)
    amount: Mapped[Decimal] = mapped_column(nullable=False)
    description: Mapped[str] = mapped_column(String, nullable=False, default="")

    employee: Mapped[EmployeeRecord] = relationship(back_populates="salary_payments")

    def to_domain(self) -> SalaryPayment:
        return SalaryPayment(
            id=self.payment_id,
            employee_id=self.employee_id,
            payment_date=self.payment_date,
            amount=Decimal(self.amount),
            description=self.description,
        )
