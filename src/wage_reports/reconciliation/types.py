"""Type definitions for the reconciliation pipeline."""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum


class CustomType(str, Enum):
    """Category tag for an attendance adjustment."""

    OVERTIME = "ot"
    HALF_DAY = "half-day"
    CUSTOM = "custom"


class BalanceStatus(str, Enum):
    """How a month's final amount is presented."""

    SETTLED = "settled"  # final amount is exactly zero
    DUE = "due"  # employee is owed money
    OVERPAID = "overpaid"  # company has paid more than earned


class UserRole(str, Enum):
    """Role of the viewer. Display hint only, never enforced."""

    ADMIN = "admin"
    VIEWER = "viewer"


class InvalidMonthError(ValueError):
    """Raised when a month token is not a valid YYYY-MM string."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid month '{token}', expected YYYY-MM")


class InvalidRoleError(ValueError):
    """Raised when a role string is neither 'admin' nor 'viewer'."""

    def __init__(self, role: str):
        self.role = role
        super().__init__(f"Invalid user role '{role}'")


def as_date(value: date | datetime) -> date:
    """Reduce a datetime to its calendar date; pass dates through."""
    if isinstance(value, datetime):
        return value.date()
    return value


_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")


@dataclass(frozen=True, order=True)
class Month:
    """A calendar month at year+month granularity."""

    year: int
    month: int

    @classmethod
    def parse(cls, token: str) -> Month:
        """Parse a ``YYYY-MM`` token."""
        match = _MONTH_RE.match(token.strip()) if isinstance(token, str) else None
        if match is None:
            raise InvalidMonthError(str(token))
        year, month = int(match.group(1)), int(match.group(2))
        if not 1 <= month <= 12 or year < 1:
            raise InvalidMonthError(token)
        return cls(year=year, month=month)

    @classmethod
    def of(cls, value: date | datetime) -> Month:
        return cls(year=value.year, month=value.month)

    @property
    def start(self) -> date:
        """First calendar day of the month."""
        return date(self.year, self.month, 1)

    @property
    def end(self) -> date:
        """Last calendar day of the month."""
        return date(self.year, self.month, calendar.monthrange(self.year, self.month)[1])

    def contains(self, value: date | datetime) -> bool:
        """Inclusive on both ends."""
        return self.start <= as_date(value) <= self.end

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class Employee:
    """Employee as seen by the reconciliation engine."""

    id: str
    name: str
    designation: str
    daily_wage: Decimal
    contact_number: str = ""
    photo: str | None = None


@dataclass(frozen=True)
class AttendanceRecord:
    """One day of attendance, with an optional custom adjustment."""

    id: str
    employee_id: str
    date: date
    present: bool
    custom_type: CustomType | None = None
    custom_amount: Decimal | None = None


@dataclass(frozen=True)
class Advance:
    """Cash given to an employee ahead of settlement."""

    id: str
    employee_id: str
    date: date
    amount: Decimal
    description: str = ""


@dataclass(frozen=True)
class SalaryPayment:
    """Money already paid out to an employee."""

    id: str
    employee_id: str
    payment_date: date
    amount: Decimal
    description: str = ""


def _custom_total(records: tuple[AttendanceRecord, ...]) -> Decimal:
    return sum((r.custom_amount or Decimal("0") for r in records), Decimal("0"))


@dataclass(frozen=True)
class MonthlyReport:
    """Reconciliation of one employee's month. Recomputed on every query."""

    employee_id: str
    month: Month

    total_days_worked: int
    base_wages: Decimal
    additional_earnings: Decimal
    total_wages_earned: Decimal
    total_advances_taken: Decimal
    total_salary_paid: Decimal
    final_amount: Decimal

    attendance_details: tuple[AttendanceRecord, ...] = ()
    advance_details: tuple[Advance, ...] = ()
    salary_payment_details: tuple[SalaryPayment, ...] = ()

    # Partitions of attendance_details by custom_type
    ot_records: tuple[AttendanceRecord, ...] = ()
    half_day_records: tuple[AttendanceRecord, ...] = ()
    custom_payment_records: tuple[AttendanceRecord, ...] = ()

    @property
    def ot_total(self) -> Decimal:
        return _custom_total(self.ot_records)

    @property
    def half_day_total(self) -> Decimal:
        return _custom_total(self.half_day_records)

    @property
    def custom_payment_total(self) -> Decimal:
        return _custom_total(self.custom_payment_records)

    @property
    def balance_status(self) -> BalanceStatus:
        if self.final_amount == 0:
            return BalanceStatus.SETTLED
        if self.final_amount > 0:
            return BalanceStatus.DUE
        return BalanceStatus.OVERPAID
