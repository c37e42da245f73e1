"""Monthly report endpoints."""

import logging
from datetime import date
from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, HTTPException, Path, Query, status
from fastapi.responses import PlainTextResponse

from wage_reports.api.dependencies import DbSession, Reports, SalaryPayments
from wage_reports.api.schemas import (
    EmployeeCardListResponse,
    EmployeeCardResponse,
    ErrorResponse,
    MonthlyReportResponse,
    SalaryPaymentFeedResponse,
)
from wage_reports.reconciliation.types import InvalidMonthError, Month
from wage_reports.services.ledger_repository import LedgerRepository
from wage_reports.services.salary_payments import SalaryPaymentFeed

logger = logging.getLogger(__name__)

router = APIRouter(tags=["reports"])

MonthParam = Annotated[
    str | None,
    Query(pattern=r"^\d{4}-\d{2}$", description="Target month as YYYY-MM"),
]


def _resolve_month(month: str | None) -> Month:
    """Parse the month query, defaulting to the current month."""
    if month is None:
        return Month.of(date.today())
    try:
        return Month.parse(month)
    except InvalidMonthError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )


def _attachment(filename: str) -> str:
    """Content-Disposition value; names may contain non-ASCII characters."""
    fallback = filename.encode("ascii", "replace").decode("ascii").replace('"', "")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


def _feed_response(feed: SalaryPaymentFeed) -> SalaryPaymentFeedResponse:
    return SalaryPaymentFeedResponse(
        collection=feed.collection,
        loading=feed.loading,
        loaded=feed.loaded,
        count=len(feed.data),
        error=str(feed.error) if feed.error is not None else None,
    )


# ============================================================================
# Reports
# ============================================================================


@router.get(
    "/reports",
    response_model=EmployeeCardListResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def list_employee_reports(
    reports: Reports,
    month: MonthParam = None,
    search: Annotated[str, Query(max_length=200)] = "",
) -> EmployeeCardListResponse:
    """Monthly summary for every employee matching the search term."""
    target = _resolve_month(month)
    cards = reports.employee_cards(target, search)
    return EmployeeCardListResponse(
        month=str(target),
        search=search,
        view_only=reports.view_only,
        salary_payments_loading=reports.salary_payments_loading,
        items=[EmployeeCardResponse.from_card(c) for c in cards],
        total=len(cards),
    )


@router.get(
    "/reports/{employee_id}",
    response_model=MonthlyReportResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def get_employee_report(
    reports: Reports,
    employee_id: Annotated[str, Path()],
    month: MonthParam = None,
) -> MonthlyReportResponse:
    """Full reconciliation for one employee and month."""
    target = _resolve_month(month)
    employee = reports.engine.find_employee(employee_id)
    report = reports.report(employee_id, target)
    if employee is None or report is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Employee not found",
        )
    return MonthlyReportResponse.build(
        report,
        employee,
        view_only=reports.view_only,
        salary_payments_loading=reports.salary_payments_loading,
    )


@router.get(
    "/reports/{employee_id}/payslip",
    response_class=PlainTextResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def download_payslip(
    reports: Reports,
    employee_id: Annotated[str, Path()],
    month: MonthParam = None,
) -> PlainTextResponse:
    """Payslip as a text attachment."""
    target = _resolve_month(month)
    payslip = reports.payslip(employee_id, target)
    if payslip is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Employee not found",
        )
    return PlainTextResponse(
        payslip.content,
        headers={"Content-Disposition": _attachment(payslip.filename)},
    )


# ============================================================================
# Salary payment feed
# ============================================================================


@router.get(
    "/salary-payments/status",
    response_model=SalaryPaymentFeedResponse,
)
async def salary_payments_status(salary_payments: SalaryPayments) -> SalaryPaymentFeedResponse:
    """Current state of the salary payment feed."""
    return _feed_response(salary_payments)


@router.post(
    "/salary-payments/refresh",
    response_model=SalaryPaymentFeedResponse,
)
async def refresh_salary_payments(
    db: DbSession,
    salary_payments: SalaryPayments,
) -> SalaryPaymentFeedResponse:
    """Reload salary payments from the store."""
    await salary_payments.load(LedgerRepository(db).list_salary_payments)
    logger.info("Salary payments refreshed: %d entries", len(salary_payments.data))
    return _feed_response(salary_payments)
