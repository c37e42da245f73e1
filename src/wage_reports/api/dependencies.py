"""FastAPI dependencies for dependency injection."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Header, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from wage_reports.database import init_db
from wage_reports.reconciliation.types import InvalidRoleError, UserRole
from wage_reports.services.ledger_repository import LedgerRepository
from wage_reports.services.report_service import ReportService, parse_role
from wage_reports.services.salary_payments import SalaryPaymentFeed


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    _, factory = init_db()
    async with factory() as session:
        try:
            yield session
        finally:
            await session.close()


async def get_user_role(
    x_user_role: Annotated[str | None, Header()] = None
) -> UserRole:
    """Extract the viewer's role from header. Display hint only."""
    try:
        return parse_role(x_user_role)
    except InvalidRoleError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="X-User-Role must be 'admin' or 'viewer'",
        )


def get_salary_payment_feed(request: Request) -> SalaryPaymentFeed:
    """The application-wide salary payment feed."""
    return request.app.state.salary_payments


# Type aliases for cleaner dependency injection
DbSession = Annotated[AsyncSession, Depends(get_db_session)]
Role = Annotated[UserRole, Depends(get_user_role)]
SalaryPayments = Annotated[SalaryPaymentFeed, Depends(get_salary_payment_feed)]


async def get_report_service(
    db: DbSession,
    role: Role,
    salary_payments: SalaryPayments,
) -> ReportService:
    """Load the ledgers and wrap them in a report service."""
    ledgers = await LedgerRepository(db).load_ledgers()
    return ReportService(
        ledgers.employees,
        ledgers.attendance,
        ledgers.advances,
        salary_payments,
        user_role=role,
    )


Reports = Annotated[ReportService, Depends(get_report_service)]
