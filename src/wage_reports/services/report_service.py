"""Report service: the employee report screen's derived state."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from wage_reports.export.payslip import payslip_filename, render_payslip
from wage_reports.reconciliation.engine import ReconciliationEngine
from wage_reports.reconciliation.formatting import format_balance
from wage_reports.reconciliation.search import filter_employees
from wage_reports.reconciliation.types import (
    Advance,
    AttendanceRecord,
    Employee,
    InvalidRoleError,
    Month,
    MonthlyReport,
    UserRole,
)
from wage_reports.services.salary_payments import SalaryPaymentFeed

logger = logging.getLogger(__name__)


def parse_role(role: str | UserRole | None) -> UserRole:
    """Parse a role string; a missing role is treated as a viewer."""
    if role is None:
        return UserRole.VIEWER
    if isinstance(role, UserRole):
        return role
    try:
        return UserRole(role.strip().lower())
    except ValueError:
        raise InvalidRoleError(role) from None


@dataclass(frozen=True)
class EmployeeCard:
    """Per-employee summary shown in the selection grid."""

    employee: Employee
    total_days_worked: int
    final_amount: Decimal
    final_amount_display: str
    additional_earnings: Decimal
    total_salary_paid: Decimal


@dataclass(frozen=True)
class Payslip:
    """Rendered payslip ready to be saved."""

    filename: str
    content: str


class ReportService:
    """Combines the ledgers and the salary payment feed for one request.

    Reports are recomputed on every call. ``user_role`` only drives
    ``view_only``; it never changes what is computed.
    """

    def __init__(
        self,
        employees: Sequence[Employee],
        attendance: Sequence[AttendanceRecord],
        advances: Sequence[Advance],
        salary_payments: SalaryPaymentFeed,
        user_role: str | UserRole | None = None,
    ):
        self.feed = salary_payments
        self.user_role = parse_role(user_role)
        self.engine = ReconciliationEngine(
            employees, attendance, advances, salary_payments.snapshot()
        )

    @property
    def view_only(self) -> bool:
        return self.user_role == UserRole.VIEWER

    @property
    def salary_payments_loading(self) -> bool:
        return self.feed.loading or not self.feed.loaded

    def employee_cards(self, month: Month | str, search_term: str | None = None) -> list[EmployeeCard]:
        """Summaries for every employee matching the search term."""
        month = Month.parse(month) if isinstance(month, str) else month
        cards = []
        for employee in filter_employees(self.engine.employees, search_term):
            report = self.engine.generate_monthly_report(employee.id, month)
            if report is None:
                continue
            cards.append(
                EmployeeCard(
                    employee=employee,
                    total_days_worked=report.total_days_worked,
                    final_amount=report.final_amount,
                    final_amount_display=format_balance(report.final_amount),
                    additional_earnings=report.additional_earnings,
                    total_salary_paid=report.total_salary_paid,
                )
            )
        return cards

    def report(self, employee_id: str, month: Month | str) -> MonthlyReport | None:
        return self.engine.generate_monthly_report(employee_id, month)

    def payslip(
        self,
        employee_id: str,
        month: Month | str,
        generated_on: date | None = None,
    ) -> Payslip | None:
        """Render the payslip, or None if the employee does not resolve."""
        employee = self.engine.find_employee(employee_id)
        report = self.engine.generate_monthly_report(employee_id, month)
        if employee is None or report is None:
            return None
        if self.salary_payments_loading:
            logger.warning(
                "Payslip for %s %s rendered before salary payments arrived",
                employee_id,
                report.month,
            )
        return Payslip(
            filename=payslip_filename(employee, report.month),
            content=render_payslip(report, employee, generated_on),
        )
