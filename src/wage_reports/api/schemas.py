"""Pydantic schemas for API request/response models."""

from __future__ import annotations

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from wage_reports.reconciliation.formatting import (
    format_balance,
    format_currency,
    format_month,
    format_short_date,
)
from wage_reports.reconciliation.types import (
    Advance,
    AttendanceRecord,
    Employee,
    MonthlyReport,
    SalaryPayment,
)
from wage_reports.services.report_service import EmployeeCard


# ============================================================================
# Base schemas
# ============================================================================


class EmployeeResponse(BaseModel):
    """Employee identity as shown on a report."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    designation: str
    daily_wage: Decimal
    contact_number: str
    photo: str | None = None

    @classmethod
    def from_domain(cls, employee: Employee) -> EmployeeResponse:
        return cls.model_validate(employee)


# ============================================================================
# Employee card schemas
# ============================================================================


class EmployeeCardResponse(BaseModel):
    """Summary line for one employee in the selection grid."""

    employee: EmployeeResponse
    total_days_worked: int
    final_amount: Decimal
    final_amount_display: str
    additional_earnings: Decimal
    total_salary_paid: Decimal

    @classmethod
    def from_card(cls, card: EmployeeCard) -> EmployeeCardResponse:
        return cls(
            employee=EmployeeResponse.from_domain(card.employee),
            total_days_worked=card.total_days_worked,
            final_amount=card.final_amount,
            final_amount_display=card.final_amount_display,
            additional_earnings=card.additional_earnings,
            total_salary_paid=card.total_salary_paid,
        )


class EmployeeCardListResponse(BaseModel):
    """Schema for the employee selection grid."""

    month: str
    search: str
    view_only: bool
    salary_payments_loading: bool
    items: list[EmployeeCardResponse]
    total: int


# ============================================================================
# Monthly report schemas
# ============================================================================


class AttendanceLine(BaseModel):
    id: str
    date: dt.date
    date_display: str
    present: bool
    custom_type: str | None = None
    custom_amount: Decimal | None = None

    @classmethod
    def from_domain(cls, record: AttendanceRecord) -> AttendanceLine:
        return cls(
            id=record.id,
            date=record.date,
            date_display=format_short_date(record.date),
            present=record.present,
            custom_type=record.custom_type.value if record.custom_type else None,
            custom_amount=record.custom_amount,
        )


class AdvanceLine(BaseModel):
    id: str
    date: dt.date
    date_display: str
    amount: Decimal
    description: str

    @classmethod
    def from_domain(cls, advance: Advance) -> AdvanceLine:
        return cls(
            id=advance.id,
            date=advance.date,
            date_display=format_short_date(advance.date),
            amount=advance.amount,
            description=advance.description,
        )


class SalaryPaymentLine(BaseModel):
    id: str
    payment_date: dt.date
    date_display: str
    amount: Decimal
    description: str

    @classmethod
    def from_domain(cls, payment: SalaryPayment) -> SalaryPaymentLine:
        return cls(
            id=payment.id,
            payment_date=payment.payment_date,
            date_display=format_short_date(payment.payment_date),
            amount=payment.amount,
            description=payment.description,
        )


class AdditionalEarningsBreakdown(BaseModel):
    """Custom adjustment subtotals by category."""

    overtime_days: int
    overtime_total: Decimal
    half_days: int
    half_day_total: Decimal
    custom_payments: int
    custom_payment_total: Decimal


class MonthlyReportResponse(BaseModel):
    """Schema for one employee's monthly reconciliation."""

    employee: EmployeeResponse
    month: str
    month_display: str
    view_only: bool
    salary_payments_loading: bool

    total_days_worked: int
    base_wages: Decimal
    additional_earnings: Decimal
    total_wages_earned: Decimal
    total_advances_taken: Decimal
    total_salary_paid: Decimal
    final_amount: Decimal
    final_amount_display: str
    balance_status: str
    total_wages_display: str

    breakdown: AdditionalEarningsBreakdown
    attendance_details: list[AttendanceLine]
    advance_details: list[AdvanceLine]
    salary_payment_details: list[SalaryPaymentLine]

    @classmethod
    def build(
        cls,
        report: MonthlyReport,
        employee: Employee,
        *,
        view_only: bool,
        salary_payments_loading: bool,
    ) -> MonthlyReportResponse:
        return cls(
            employee=EmployeeResponse.from_domain(employee),
            month=str(report.month),
            month_display=format_month(report.month),
            view_only=view_only,
            salary_payments_loading=salary_payments_loading,
            total_days_worked=report.total_days_worked,
            base_wages=report.base_wages,
            additional_earnings=report.additional_earnings,
            total_wages_earned=report.total_wages_earned,
            total_advances_taken=report.total_advances_taken,
            total_salary_paid=report.total_salary_paid,
            final_amount=report.final_amount,
            final_amount_display=format_balance(report.final_amount),
            balance_status=report.balance_status.value,
            total_wages_display=format_currency(report.total_wages_earned),
            breakdown=AdditionalEarningsBreakdown(
                overtime_days=len(report.ot_records),
                overtime_total=report.ot_total,
                half_days=len(report.half_day_records),
                half_day_total=report.half_day_total,
                custom_payments=len(report.custom_payment_records),
                custom_payment_total=report.custom_payment_total,
            ),
            attendance_details=[AttendanceLine.from_domain(a) for a in report.attendance_details],
            advance_details=[AdvanceLine.from_domain(a) for a in report.advance_details],
            salary_payment_details=[
                SalaryPaymentLine.from_domain(p) for p in report.salary_payment_details
            ],
        )


# ============================================================================
# Salary payment feed schemas
# ============================================================================


class SalaryPaymentFeedResponse(BaseModel):
    """State of the salary payment feed."""

    collection: str
    loading: bool
    loaded: bool
    count: int
    error: str | None = None


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str
    code: str | None = None
