"""Monthly wage reconciliation reports and payslip export."""

__version__ = "0.1.0"
