"""Pytest fixtures for wage report tests."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

import pytest

from wage_reports.reconciliation.types import (
    Advance,
    AttendanceRecord,
    CustomType,
    Employee,
    SalaryPayment,
)

SAMPLE_DATASET = {
    "employees": [
        {
            "id": "emp-ramesh",
            "name": "Ramesh Kumar",
            "designation": "Mason",
            "dailyWage": 800,
            "contactNumber": "+91 98450 12345",
        },
        {
            "id": "emp-sunita",
            "name": "Sunita Devi",
            "designation": "Helper",
            "dailyWage": 500,
            "contactNumber": "+91 98450 67890",
        },
        {
            "id": "emp-arjun",
            "name": "Arjun Patil",
            "designation": "Site Supervisor",
            "dailyWage": 1200,
            "contactNumber": "+91 99000 11223",
        },
    ],
    "attendance": [
        {"id": "att-001", "employeeId": "emp-ramesh", "date": "2026-01-01", "present": True},
        {
            "id": "att-002",
            "employeeId": "emp-ramesh",
            "date": "2026-01-02",
            "present": True,
            "customType": "ot",
            "customAmount": 200,
        },
        {
            "id": "att-003",
            "employeeId": "emp-ramesh",
            "date": "2026-01-03",
            "present": False,
            "customType": "half-day",
            "customAmount": 400,
        },
        {"id": "att-004", "employeeId": "emp-ramesh", "date": "2026-01-31", "present": True},
        {"id": "att-005", "employeeId": "emp-sunita", "date": "2026-01-05", "present": True},
        {
            "id": "att-006",
            "employeeId": "emp-sunita",
            "date": "2026-01-06",
            "present": True,
            "customType": "custom",
            "customAmount": 150,
        },
        {"id": "att-007", "employeeId": "emp-arjun", "date": "2026-01-10", "present": True},
        {"id": "att-008", "employeeId": "emp-arjun", "date": "2026-02-01", "present": True},
    ],
    "advances": [
        {
            "id": "adv-001",
            "employeeId": "emp-ramesh",
            "date": "2026-01-15",
            "amount": 1000,
            "description": "Festival advance",
        },
        {
            "id": "adv-002",
            "employeeId": "emp-arjun",
            "date": "2026-01-20",
            "amount": 2000,
            "description": "Medical",
        },
    ],
    "salaryPayments": [
        {
            "id": "pay-001",
            "employeeId": "emp-ramesh",
            "paymentDate": "2026-01-31",
            "amount": 1000,
            "description": "Part payment",
        },
        {
            "id": "pay-002",
            "employeeId": "emp-sunita",
            "paymentDate": "2026-01-31",
            "amount": 1150,
            "description": "January settlement",
        },
    ],
}


@pytest.fixture
def sample_dataset() -> dict:
    """Raw dataset document (Ramesh owed 1000, Sunita settled, Arjun overpaid 800)."""
    return SAMPLE_DATASET


@pytest.fixture
def employee() -> Employee:
    """Employee on a 500/day wage."""
    return Employee(
        id="emp-1",
        name="Lakshmi Narayan",
        designation="Carpenter",
        daily_wage=Decimal("500"),
        contact_number="+91 90000 00001",
    )


@pytest.fixture
def other_employee() -> Employee:
    return Employee(
        id="emp-2",
        name="Mohan Das",
        designation="Electrician",
        daily_wage=Decimal("700"),
    )


@pytest.fixture
def twenty_present_days(employee: Employee) -> list[AttendanceRecord]:
    """20 present days in January 2026 with no custom amounts."""
    start = date(2026, 1, 5)
    return [
        AttendanceRecord(
            id=f"att-{i}",
            employee_id=employee.id,
            date=start + timedelta(days=i),
            present=True,
        )
        for i in range(20)
    ]


@pytest.fixture
def overtime_absent_day(employee: Employee) -> AttendanceRecord:
    """Overtime of 300 recorded on a day the employee was not present."""
    return AttendanceRecord(
        id="att-ot",
        employee_id=employee.id,
        date=date(2026, 1, 28),
        present=False,
        custom_type=CustomType.OVERTIME,
        custom_amount=Decimal("300"),
    )


@pytest.fixture
def january_advance(employee: Employee) -> Advance:
    return Advance(
        id="adv-1",
        employee_id=employee.id,
        date=date(2026, 1, 12),
        amount=Decimal("2000"),
        description="Rent",
    )


@pytest.fixture
def january_payment(employee: Employee) -> SalaryPayment:
    return SalaryPayment(
        id="pay-1",
        employee_id=employee.id,
        payment_date=date(2026, 1, 20),
        amount=Decimal("5000"),
        description="Mid-month payment",
    )
