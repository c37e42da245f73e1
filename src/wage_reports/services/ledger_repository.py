"""Loads ledgers from the database into domain collections."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wage_reports.database import get_session
from wage_reports.models import (
    AdvanceEntry,
    AttendanceEntry,
    EmployeeRecord,
    SalaryPaymentEntry,
)
from wage_reports.reconciliation.types import (
    Advance,
    AttendanceRecord,
    Employee,
    SalaryPayment,
)


@dataclass(frozen=True)
class Ledgers:
    """The pre-loaded collections the engine reads."""

    employees: tuple[Employee, ...]
    attendance: tuple[AttendanceRecord, ...]
    advances: tuple[Advance, ...]


class LedgerRepository:
    """Reads employees and ledger entries through an async session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_employees(self) -> tuple[Employee, ...]:
        result = await self.session.execute(
            select(EmployeeRecord).order_by(EmployeeRecord.name, EmployeeRecord.employee_id)
        )
        return tuple(row.to_domain() for row in result.scalars().all())

    async def list_attendance(self) -> tuple[AttendanceRecord, ...]:
        result = await self.session.execute(
            select(AttendanceEntry).order_by(
                AttendanceEntry.work_date, AttendanceEntry.attendance_id
            )
        )
        return tuple(row.to_domain() for row in result.scalars().all())

    async def list_advances(self) -> tuple[Advance, ...]:
        result = await self.session.execute(
            select(AdvanceEntry).order_by(AdvanceEntry.advance_date, AdvanceEntry.advance_id)
        )
        return tuple(row.to_domain() for row in result.scalars().all())

    async def list_salary_payments(self) -> tuple[SalaryPayment, ...]:
        result = await self.session.execute(
            select(SalaryPaymentEntry).order_by(
                SalaryPaymentEntry.payment_date, SalaryPaymentEntry.payment_id
            )
        )
        return tuple(row.to_domain() for row in result.scalars().all())

    async def load_ledgers(self) -> Ledgers:
        """Load everything except salary payments, which arrive separately."""
        return Ledgers(
            employees=await self.list_employees(),
            attendance=await self.list_attendance(),
            advances=await self.list_advances(),
        )


async def fetch_salary_payments() -> tuple[SalaryPayment, ...]:
    """Fetch the salary payment collection with a fresh session."""
    async with get_session() as session:
        return await LedgerRepository(session).list_salary_payments()
