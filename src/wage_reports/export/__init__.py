"""Report export formats."""

from wage_reports.export.payslip import payslip_filename, render_payslip

__all__ = ["payslip_filename", "render_payslip"]
