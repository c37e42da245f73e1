"""Unit tests for ReconciliationEngine."""

import pytest
from copy import deepcopy
from datetime import date, datetime
from decimal import Decimal

from wage_reports.reconciliation.engine import (
    ReconciliationEngine,
    generate_monthly_report,
)
from wage_reports.reconciliation.formatting import format_balance
from wage_reports.reconciliation.types import (
    Advance,
    AttendanceRecord,
    BalanceStatus,
    CustomType,
    InvalidMonthError,
    Month,
    SalaryPayment,
)


class TestMonth:
    """Test month token parsing and boundaries."""

    def test_parse(self):
        month = Month.parse("2026-02")
        assert month == Month(2026, 2)
        assert str(month) == "2026-02"

    def test_boundaries(self):
        assert Month.parse("2026-02").end == date(2026, 2, 28)
        assert Month.parse("2024-02").end == date(2024, 2, 29)
        assert Month.parse("2026-12").start == date(2026, 12, 1)
        assert Month.parse("2026-12").end == date(2026, 12, 31)

    @pytest.mark.parametrize("token", ["2026-13", "2026-00", "2026-1", "Jan 2026", ""])
    def test_invalid_tokens_raise(self, token):
        with pytest.raises(InvalidMonthError):
            Month.parse(token)

    def test_contains_accepts_datetimes(self):
        month = Month.parse("2026-01")
        assert month.contains(datetime(2026, 1, 31, 23, 59))
        assert not month.contains(datetime(2026, 2, 1, 0, 0))


class TestReportLookup:
    """Test employee resolution."""

    def test_unknown_employee_returns_none(self, employee):
        engine = ReconciliationEngine([employee], [], [], [])

        assert engine.generate_monthly_report("missing", "2026-01") is None

    def test_no_records_gives_all_zero_report(self, employee):
        engine = ReconciliationEngine([employee], [], [], [])

        report = engine.generate_monthly_report(employee.id, "2026-01")

        assert report is not None
        assert report.total_days_worked == 0
        assert report.base_wages == 0
        assert report.additional_earnings == 0
        assert report.total_wages_earned == 0
        assert report.total_advances_taken == 0
        assert report.total_salary_paid == 0
        assert report.final_amount == 0
        assert report.balance_status == BalanceStatus.SETTLED
        assert report.attendance_details == ()


class TestAccumulation:
    """Test earnings and deduction arithmetic."""

    def test_base_wages_from_present_days(self, employee, twenty_present_days):
        engine = ReconciliationEngine([employee], twenty_present_days, [], [])

        report = engine.generate_monthly_report(employee.id, "2026-01")

        assert report.total_days_worked == 20
        assert report.base_wages == Decimal("10000")
        assert report.additional_earnings == Decimal("0")
        assert report.total_wages_earned == Decimal("10000")

    def test_custom_amount_counts_when_absent(
        self, employee, twenty_present_days, overtime_absent_day
    ):
        attendance = twenty_present_days + [overtime_absent_day]
        engine = ReconciliationEngine([employee], attendance, [], [])

        report = engine.generate_monthly_report(employee.id, "2026-01")

        assert report.total_days_worked == 20
        assert report.additional_earnings == Decimal("300")
        assert report.ot_records == (overtime_absent_day,)
        assert report.half_day_records == ()
        assert report.custom_payment_records == ()
        assert report.ot_total == Decimal("300")

    def test_final_amount(
        self,
        employee,
        twenty_present_days,
        overtime_absent_day,
        january_advance,
        january_payment,
    ):
        engine = ReconciliationEngine(
            [employee],
            twenty_present_days + [overtime_absent_day],
            [january_advance],
            [january_payment],
        )

        report = engine.generate_monthly_report(employee.id, "2026-01")

        assert report.total_advances_taken == Decimal("2000")
        assert report.total_salary_paid == Decimal("5000")
        assert report.final_amount == Decimal("3300")
        assert report.balance_status == BalanceStatus.DUE
        assert format_balance(report.final_amount) == "+₹3,300"

    def test_totals_are_consistent(self, employee, twenty_present_days, january_advance):
        engine = ReconciliationEngine([employee], twenty_present_days, [january_advance], [])

        report = engine.generate_monthly_report(employee.id, "2026-01")

        assert report.total_wages_earned == report.base_wages + report.additional_earnings
        assert report.final_amount == (
            report.total_wages_earned
            - report.total_advances_taken
            - report.total_salary_paid
        )

    def test_overpaid_month(self, employee, january_payment):
        engine = ReconciliationEngine([employee], [], [], [january_payment])

        report = engine.generate_monthly_report(employee.id, "2026-01")

        assert report.final_amount == Decimal("-5000")
        assert report.balance_status == BalanceStatus.OVERPAID

    def test_decimal_amounts_do_not_drift(self, employee):
        attendance = [
            AttendanceRecord(
                id=f"a{i}",
                employee_id=employee.id,
                date=date(2026, 3, i + 1),
                present=False,
                custom_type=CustomType.CUSTOM,
                custom_amount=Decimal("0.10"),
            )
            for i in range(30)
        ]
        engine = ReconciliationEngine([employee], attendance, [], [])

        report = engine.generate_monthly_report(employee.id, "2026-03")

        assert report.additional_earnings == Decimal("3.00")


class TestFiltering:
    """Test month and employee filtering."""

    def test_month_boundaries_are_inclusive(self, employee):
        def day(d):
            return AttendanceRecord(id=str(d), employee_id=employee.id, date=d, present=True)

        attendance = [
            day(date(2025, 12, 31)),
            day(date(2026, 1, 1)),
            day(date(2026, 1, 31)),
            day(date(2026, 2, 1)),
        ]
        advances = [
            Advance("a1", employee.id, date(2026, 1, 1), Decimal("10")),
            Advance("a2", employee.id, date(2026, 2, 1), Decimal("20")),
        ]
        payments = [
            SalaryPayment("p1", employee.id, date(2025, 12, 31), Decimal("30")),
            SalaryPayment("p2", employee.id, date(2026, 1, 31), Decimal("40")),
        ]
        engine = ReconciliationEngine([employee], attendance, advances, payments)

        report = engine.generate_monthly_report(employee.id, "2026-01")

        assert [a.date for a in report.attendance_details] == [
            date(2026, 1, 1),
            date(2026, 1, 31),
        ]
        assert report.total_days_worked == 2
        assert report.total_advances_taken == Decimal("10")
        assert report.total_salary_paid == Decimal("40")

    def test_other_employees_records_excluded(
        self, employee, other_employee, twenty_present_days
    ):
        foreign = AttendanceRecord(
            id="x", employee_id=other_employee.id, date=date(2026, 1, 10), present=True
        )
        engine = ReconciliationEngine(
            [employee, other_employee], twenty_present_days + [foreign], [], []
        )

        report = engine.generate_monthly_report(other_employee.id, "2026-01")

        assert report.total_days_worked == 1
        assert report.base_wages == Decimal("700")

    def test_partitions_are_disjoint_subsets(self, employee):
        types = [CustomType.OVERTIME, CustomType.HALF_DAY, CustomType.CUSTOM, None]
        attendance = [
            AttendanceRecord(
                id=f"a{i}",
                employee_id=employee.id,
                date=date(2026, 1, i + 1),
                present=i % 2 == 0,
                custom_type=types[i % 4],
                custom_amount=Decimal("100") if types[i % 4] else None,
            )
            for i in range(12)
        ]
        engine = ReconciliationEngine([employee], attendance, [], [])

        report = engine.generate_monthly_report(employee.id, "2026-01")

        ot = {r.id for r in report.ot_records}
        half = {r.id for r in report.half_day_records}
        custom = {r.id for r in report.custom_payment_records}
        everything = {r.id for r in report.attendance_details}
        assert ot.isdisjoint(half)
        assert ot.isdisjoint(custom)
        assert half.isdisjoint(custom)
        assert ot | half | custom <= everything
        assert len(everything - (ot | half | custom)) == 3


class TestSalaryPaymentsNotAvailable:
    """Salary payments that have not arrived count as empty."""

    def test_none_is_treated_as_empty(self, employee, twenty_present_days):
        engine = ReconciliationEngine([employee], twenty_present_days, [], None)

        report = engine.generate_monthly_report(employee.id, "2026-01")

        assert report.total_salary_paid == 0
        assert report.salary_payment_details == ()
        assert report.final_amount == Decimal("10000")


class TestPurity:
    """Repeated calls are side-effect free."""

    def test_repeated_calls_are_equal_and_inputs_untouched(
        self, employee, twenty_present_days, january_advance, january_payment
    ):
        attendance = list(twenty_present_days)
        advances = [january_advance]
        payments = [january_payment]
        before = deepcopy((attendance, advances, payments))

        first = generate_monthly_report(
            employee.id,
            "2026-01",
            employees=[employee],
            attendance=attendance,
            advances=advances,
            salary_payments=payments,
        )
        second = generate_monthly_report(
            employee.id,
            Month(2026, 1),
            employees=[employee],
            attendance=attendance,
            advances=advances,
            salary_payments=payments,
        )

        assert first == second
        assert (attendance, advances, payments) == before
