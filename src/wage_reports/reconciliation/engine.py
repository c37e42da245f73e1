"""Monthly reconciliation engine."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal

from wage_reports.reconciliation.types import (
    Advance,
    AttendanceRecord,
    CustomType,
    Employee,
    Month,
    MonthlyReport,
    SalaryPayment,
)


class ReconciliationEngine:
    """Builds monthly reports from already-loaded ledgers.

    Pipeline (per employee, per month):
    1) Resolve the employee (a miss returns None)
    2) Filter attendance, advances and salary payments to the month,
       inclusive of the first and last day
    3) Accumulate base wages, additional earnings and deductions
    4) Partition attendance by custom adjustment category

    The engine only reads its ledgers. ``salary_payments=None`` means the
    external payment store has not delivered yet and is computed as empty.
    """

    def __init__(
        self,
        employees: Sequence[Employee],
        attendance: Sequence[AttendanceRecord],
        advances: Sequence[Advance],
        salary_payments: Sequence[SalaryPayment] | None = None,
    ):
        self.employees = employees
        self.attendance = attendance
        self.advances = advances
        self.salary_payments = salary_payments

    def find_employee(self, employee_id: str) -> Employee | None:
        for employee in self.employees:
            if employee.id == employee_id:
                return employee
        return None

    def generate_monthly_report(
        self, employee_id: str, month: Month | str
    ) -> MonthlyReport | None:
        """Reconcile one employee's month, or None if the id does not resolve."""
        employee = self.find_employee(employee_id)
        if employee is None:
            return None

        if isinstance(month, str):
            month = Month.parse(month)

        month_attendance = tuple(
            a for a in self.attendance
            if a.employee_id == employee_id and month.contains(a.date)
        )
        month_advances = tuple(
            a for a in self.advances
            if a.employee_id == employee_id and month.contains(a.date)
        )
        month_payments = tuple(
            p for p in (self.salary_payments or ())
            if p.employee_id == employee_id and month.contains(p.payment_date)
        )

        total_days_worked = 0
        base_wages = Decimal("0")
        additional_earnings = Decimal("0")

        for record in month_attendance:
            if record.present:
                total_days_worked += 1
                base_wages += employee.daily_wage
            # Custom amounts count whether or not the day was present
            if record.custom_amount:
                additional_earnings += record.custom_amount

        total_wages_earned = base_wages + additional_earnings
        total_advances_taken = _sum_amounts(month_advances)
        total_salary_paid = _sum_amounts(month_payments)
        final_amount = total_wages_earned - total_advances_taken - total_salary_paid

        return MonthlyReport(
            employee_id=employee_id,
            month=month,
            total_days_worked=total_days_worked,
            base_wages=base_wages,
            additional_earnings=additional_earnings,
            total_wages_earned=total_wages_earned,
            total_advances_taken=total_advances_taken,
            total_salary_paid=total_salary_paid,
            final_amount=final_amount,
            attendance_details=month_attendance,
            advance_details=month_advances,
            salary_payment_details=month_payments,
            ot_records=_partition(month_attendance, CustomType.OVERTIME),
            half_day_records=_partition(month_attendance, CustomType.HALF_DAY),
            custom_payment_records=_partition(month_attendance, CustomType.CUSTOM),
        )


def generate_monthly_report(
    employee_id: str,
    month: Month | str,
    *,
    employees: Sequence[Employee],
    attendance: Sequence[AttendanceRecord],
    advances: Sequence[Advance],
    salary_payments: Sequence[SalaryPayment] | None = None,
) -> MonthlyReport | None:
    """Functional wrapper around ReconciliationEngine."""
    engine = ReconciliationEngine(employees, attendance, advances, salary_payments)
    return engine.generate_monthly_report(employee_id, month)


def _sum_amounts(entries: Iterable[Advance | SalaryPayment]) -> Decimal:
    return sum((e.amount for e in entries), Decimal("0"))


def _partition(
    records: tuple[AttendanceRecord, ...], custom_type: CustomType
) -> tuple[AttendanceRecord, ...]:
    return tuple(r for r in records if r.custom_type == custom_type)
