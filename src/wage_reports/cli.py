"""Wage reports command line interface.

Works offline against a JSON dataset file (see ``wage_reports.dataset``):

Usage:
    python -m wage_reports.cli report --data ledgers.json --employee-id X --month 2026-01
    python -m wage_reports.cli payslip --data ledgers.json --employee-id X --month 2026-01
    python -m wage_reports.cli search --data ledgers.json --term mason
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from datetime import date
from pathlib import Path
from typing import Callable

from pydantic import ValidationError

from wage_reports.api.schemas import EmployeeCardResponse, MonthlyReportResponse
from wage_reports.config import configure_logging, get_settings
from wage_reports.dataset import Dataset, load_dataset
from wage_reports.reconciliation.types import InvalidMonthError, Month, UserRole
from wage_reports.services.report_service import ReportService
from wage_reports.services.salary_payments import SalaryPaymentFeed

logger = logging.getLogger(__name__)


def parse_month(s: str) -> Month:
    """Parse YYYY-MM month token."""
    try:
        return Month.parse(s)
    except InvalidMonthError as e:
        raise argparse.ArgumentTypeError(str(e))


def payslip_path(output_dir: Path, filename: str) -> Path:
    """Path for a payslip file inside ``output_dir``.

    Employee names may contain path separators, so they are replaced before
    joining. Raises ValueError if the result would leave ``output_dir``.
    """
    for sep in {"/", "\\", os.sep, os.altsep}:
        if sep:
            filename = filename.replace(sep, "_")
    path = output_dir / filename
    if not path.resolve().is_relative_to(output_dir.resolve()):
        raise ValueError(f"Payslip path escapes output directory: {filename}")
    return path


def build_service(dataset: Dataset, role: str | None = None) -> ReportService:
    """Wrap a dataset in a report service."""
    feed = SalaryPaymentFeed(get_settings().salary_payments_collection)
    payments = dataset.salary_payment_list()
    if payments is not None:
        feed.set(payments)
    return ReportService(
        dataset.employee_list(),
        dataset.attendance_list(),
        dataset.advance_list(),
        feed,
        user_role=role,
    )


class WageReportsCli:
    """Wage reports command line interface."""

    def __init__(self) -> None:
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="python -m wage_reports.cli",
            description="Monthly wage reports and payslips",
        )
        parser.add_argument(
            "--log-level",
            type=str,
            default=None,
            help="Logging level (default: from LOG_LEVEL)",
        )
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        common = argparse.ArgumentParser(add_help=False)
        common.add_argument(
            "--data",
            type=Path,
            required=True,
            help="Path to a JSON dataset file",
        )
        common.add_argument(
            "--month",
            type=parse_month,
            default=Month.of(date.today()),
            help="Target month as YYYY-MM (default: current month)",
        )
        common.add_argument(
            "--role",
            choices=[r.value for r in UserRole],
            default=UserRole.ADMIN.value,
            help="Viewer role, display only (default: admin)",
        )

        # report command
        report = subparsers.add_parser(
            "report",
            parents=[common],
            help="Print one employee's monthly report as JSON",
        )
        report.add_argument("--employee-id", type=str, required=True, help="Employee ID")

        # payslip command
        payslip = subparsers.add_parser(
            "payslip",
            parents=[common],
            help="Write one employee's payslip to a text file",
        )
        payslip.add_argument("--employee-id", type=str, required=True, help="Employee ID")
        payslip.add_argument(
            "--output-dir",
            type=Path,
            default=None,
            help="Directory for the payslip file (default: PAYSLIP_OUTPUT_DIR)",
        )
        payslip.add_argument(
            "--stdout",
            action="store_true",
            help="Print the payslip instead of writing a file",
        )

        # search command
        search = subparsers.add_parser(
            "search",
            parents=[common],
            help="List employee summaries matching a search term",
        )
        search.add_argument(
            "--term",
            type=str,
            default="",
            help="Case-insensitive match on name or designation",
        )

        return parser

    def run(self, args: list[str] | None = None) -> int:
        """Run the CLI with given arguments."""
        parsed = self.parser.parse_args(args)
        configure_logging(parsed.log_level)

        if not parsed.command:
            self.parser.print_help()
            return 1

        try:
            dataset = load_dataset(parsed.data)
        except FileNotFoundError:
            print(f"ERROR: Dataset not found: {parsed.data}", file=sys.stderr)
            return 1
        except (json.JSONDecodeError, ValidationError) as e:
            print(f"ERROR: Invalid dataset {parsed.data}: {e}", file=sys.stderr)
            return 1

        service = build_service(dataset, parsed.role)

        # Dispatch to command handler
        handlers: dict[str, Callable[..., int]] = {
            "report": self._cmd_report,
            "payslip": self._cmd_payslip,
            "search": self._cmd_search,
        }

        handler = handlers.get(parsed.command)
        if handler:
            return handler(service, parsed)

        print(f"Unknown command: {parsed.command}", file=sys.stderr)
        return 1

    def _cmd_report(self, service: ReportService, args: argparse.Namespace) -> int:
        """Print a monthly report."""
        employee = service.engine.find_employee(args.employee_id)
        report = service.report(args.employee_id, args.month)
        if employee is None or report is None:
            print(f"ERROR: Employee not found: {args.employee_id}", file=sys.stderr)
            return 1

        body = MonthlyReportResponse.build(
            report,
            employee,
            view_only=service.view_only,
            salary_payments_loading=service.salary_payments_loading,
        )
        print(json.dumps(body.model_dump(mode="json"), indent=2, ensure_ascii=False))
        return 0

    def _cmd_payslip(self, service: ReportService, args: argparse.Namespace) -> int:
        """Write a payslip file."""
        payslip = service.payslip(args.employee_id, args.month)
        if payslip is None:
            print(f"ERROR: Employee not found: {args.employee_id}", file=sys.stderr)
            return 1

        if args.stdout:
            print(payslip.content)
            return 0

        output_dir = args.output_dir or Path(get_settings().payslip_output_dir)
        try:
            path = payslip_path(output_dir, payslip.filename)
        except ValueError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
        output_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(payslip.content, encoding="utf-8")
        logger.info("Wrote payslip for %s to %s", args.employee_id, path)
        print(path)
        return 0

    def _cmd_search(self, service: ReportService, args: argparse.Namespace) -> int:
        """List matching employee summaries."""
        cards = service.employee_cards(args.month, args.term)
        if not cards and args.term:
            print("No employees found matching your search.")
            return 0

        for card in cards:
            body = EmployeeCardResponse.from_card(card)
            print(json.dumps(body.model_dump(mode="json"), ensure_ascii=False))
        return 0


def main() -> int:
    """CLI entry point."""
    cli = WageReportsCli()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
