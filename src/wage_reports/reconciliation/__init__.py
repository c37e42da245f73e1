"""Monthly wage reconciliation."""

from wage_reports.reconciliation.engine import ReconciliationEngine, generate_monthly_report
from wage_reports.reconciliation.formatting import format_balance, format_currency
from wage_reports.reconciliation.search import filter_employees
from wage_reports.reconciliation.types import (
    Advance,
    AttendanceRecord,
    BalanceStatus,
    CustomType,
    Employee,
    InvalidMonthError,
    InvalidRoleError,
    Month,
    MonthlyReport,
    SalaryPayment,
    UserRole,
)

__all__ = [
    "ReconciliationEngine",
    "generate_monthly_report",
    "filter_employees",
    "format_balance",
    "format_currency",
    "Advance",
    "AttendanceRecord",
    "BalanceStatus",
    "CustomType",
    "Employee",
    "InvalidMonthError",
    "InvalidRoleError",
    "Month",
    "MonthlyReport",
    "SalaryPayment",
    "UserRole",
]
