"""ORM models."""

from wage_reports.models.base import Base, TimestampMixin
from wage_reports.models.employee import EmployeeRecord
from wage_reports.models.ledger import AdvanceEntry, AttendanceEntry, SalaryPaymentEntry

__all__ = [
    "Base",
    "TimestampMixin",
    "EmployeeRecord",
    "AttendanceEntry",
    "AdvanceEntry",
    "SalaryPaymentEntry",
]
