"""Services for wage reports."""

from wage_reports.services.ledger_repository import LedgerRepository, Ledgers
from wage_reports.services.report_service import (
    EmployeeCard,
    Payslip,
    ReportService,
    parse_role,
)
from wage_reports.services.salary_payments import SalaryPaymentFeed

__all__ = [
    "LedgerRepository",
    "Ledgers",
    "EmployeeCard",
    "Payslip",
    "ReportService",
    "parse_role",
    "SalaryPaymentFeed",
]
