"""Plain-text payslip export."""

from __future__ import annotations

from datetime import date

from wage_reports.reconciliation.formatting import (
    format_balance,
    format_currency,
    format_long_date,
    format_month,
)
from wage_reports.reconciliation.types import (
    AttendanceRecord,
    Employee,
    Month,
    MonthlyReport,
)


def payslip_filename(employee: Employee, month: Month | str) -> str:
    """``<employeeName>_<YYYY-MM>_payslip.txt``"""
    return f"{employee.name}_{month}_payslip.txt"


def _attendance_line(record: AttendanceRecord) -> str:
    line = f"{format_long_date(record.date)}: {'Present' if record.present else 'Absent'}"
    if record.custom_type is not None:
        line += f" ({record.custom_type.value})"
    if record.custom_amount:
        line += f" +{format_currency(record.custom_amount)}"
    return line


def render_payslip(
    report: MonthlyReport,
    employee: Employee,
    generated_on: date | None = None,
) -> str:
    """Render a monthly report as a fixed-layout text payslip.

    Overtime, half-day and custom-payment lines are left out when the
    report has no records in that category.
    """
    generated_on = generated_on or date.today()
    wage = format_currency(employee.daily_wage)

    lines = [
        "MONTHLY PAYSLIP REPORT",
        "======================",
        "",
        "Employee Details:",
        f"Name: {employee.name}",
        f"Designation: {employee.designation}",
        f"Contact: {employee.contact_number}",
        f"Daily Wage: {wage}",
        "",
        f"Report Period: {format_month(report.month)}",
        "",
        "EARNINGS BREAKDOWN:",
        f"Base Wages ({report.total_days_worked} days × {wage}): "
        f"{format_currency(report.base_wages)}",
        f"Additional Earnings: {format_currency(report.additional_earnings)}",
    ]
    if report.ot_records:
        lines.append(
            f"Overtime ({len(report.ot_records)} days): {format_currency(report.ot_total)}"
        )
    if report.half_day_records:
        lines.append(
            f"Half Days ({len(report.half_day_records)} days): "
            f"{format_currency(report.half_day_total)}"
        )
    if report.custom_payment_records:
        lines.append(
            f"Custom Payments ({len(report.custom_payment_records)}): "
            f"{format_currency(report.custom_payment_total)}"
        )
    lines += [
        f"Total Wages Earned: {format_currency(report.total_wages_earned)}",
        "",
        "DEDUCTIONS:",
        f"Advances Taken: {format_currency(report.total_advances_taken)}",
        f"Salary Already Paid: {format_currency(report.total_salary_paid)}",
        "",
        "FINAL CALCULATION:",
        f"Total Wages Earned: {format_currency(report.total_wages_earned)}",
        f"Less: Advances: {format_currency(report.total_advances_taken)}",
        f"Less: Salary Paid: {format_currency(report.total_salary_paid)}",
        f"Final Amount: {format_balance(report.final_amount)}",
        "",
        "ATTENDANCE DETAILS:",
    ]
    lines += [_attendance_line(a) for a in report.attendance_details]
    lines += ["", "ADVANCE DETAILS:"]
    lines += [
        f"{format_long_date(a.date)}: {format_currency(a.amount)} - {a.description}"
        for a in report.advance_details
    ]
    lines += ["", "SALARY PAYMENT DETAILS:"]
    lines += [
        f"{format_long_date(p.payment_date)}: {format_currency(p.amount)} - {p.description}"
        for p in report.salary_payment_details
    ]
    lines += ["", f"Generated on: {format_long_date(generated_on)}", ""]
    return "\n".join(lines)
