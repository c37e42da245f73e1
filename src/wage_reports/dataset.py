"""JSON dataset files.

A dataset mirrors the document collections of the employee-management app::

    {
      "employees": [{"id", "name", "designation", "dailyWage", "contactNumber", "photo"}],
      "attendance": [{"id", "employeeId", "date", "present", "customType", "customAmount"}],
      "advances": [{"id", "employeeId", "date", "amount", "description"}],
      "salaryPayments": [{"id", "employeeId", "paymentDate", "amount", "description"}]
    }

``salaryPayments`` may be absent, meaning the collection is not available.
"""

from __future__ import annotations

import datetime as dt
import json
from decimal import Decimal
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from wage_reports.models import (
    AdvanceEntry,
    AttendanceEntry,
    Base,
    EmployeeRecord,
    SalaryPaymentEntry,
)
from wage_reports.reconciliation.types import (
    Advance,
    AttendanceRecord,
    CustomType,
    Employee,
    SalaryPayment,
)


class _Document(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EmployeeDocument(_Document):
    id: str
    name: str
    designation: str = ""
    daily_wage: Decimal = Field(ge=0)
    contact_number: str = ""
    photo: str | None = None

    def to_domain(self) -> Employee:
        return Employee(
            id=self.id,
            name=self.name,
            designation=self.designation,
            daily_wage=self.daily_wage,
            contact_number=self.contact_number,
            photo=self.photo,
        )


class AttendanceDocument(_Document):
    id: str
    employee_id: str
    date: dt.date
    present: bool = False
    custom_type: CustomType | None = None
    custom_amount: Decimal | None = None

    def to_domain(self) -> AttendanceRecord:
        return AttendanceRecord(
            id=self.id,
            employee_id=self.employee_id,
            date=self.date,
            present=self.present,
            custom_type=self.custom_type,
            custom_amount=self.custom_amount,
        )


class AdvanceDocument(_Document):
    id: str
    employee_id: str
    date: dt.date
    amount: Decimal = Field(gt=0)
    description: str = ""

    def to_domain(self) -> Advance:
        return Advance(
            id=self.id,
            employee_id=self.employee_id,
            date=self.date,
            amount=self.amount,
            description=self.description,
        )


class SalaryPaymentDocument(_Document):
    id: str
    employee_id: str
    payment_date: dt.date
    amount: Decimal = Field(gt=0)
    description: str = ""

    def to_domain(self) -> SalaryPayment:
        return SalaryPayment(
            id=self.id,
            employee_id=self.employee_id,
            payment_date=self.payment_date,
            amount=self.amount,
            description=self.description,
        )


class Dataset(_Document):
    """All four collections, as stored in a dataset file."""

    employees: list[EmployeeDocument] = Field(default_factory=list)
    attendance: list[AttendanceDocument] = Field(default_factory=list)
    advances: list[AdvanceDocument] = Field(default_factory=list)
    salary_payments: list[SalaryPaymentDocument] | None = None

    def employee_list(self) -> tuple[Employee, ...]:
        return tuple(e.to_domain() for e in self.employees)

    def attendance_list(self) -> tuple[AttendanceRecord, ...]:
        return tuple(a.to_domain() for a in self.attendance)

    def advance_list(self) -> tuple[Advance, ...]:
        return tuple(a.to_domain() for a in self.advances)

    def salary_payment_list(self) -> tuple[SalaryPayment, ...] | None:
        if self.salary_payments is None:
            return None
        return tuple(p.to_domain() for p in self.salary_payments)


def load_dataset(path: str | Path) -> Dataset:
    """Read and validate a dataset file."""
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    return Dataset.model_validate(raw)


def dataset_rows(dataset: Dataset) -> list[Base]:
    """ORM rows for every document in a dataset."""
    rows: list[Base] = [
        EmployeeRecord(
            employee_id=e.id,
            name=e.name,
            designation=e.designation,
            daily_wage=e.daily_wage,
            contact_number=e.contact_number,
            photo=e.photo,
        )
        for e in dataset.employees
    ]
    rows += [
        AttendanceEntry(
            attendance_id=a.id,
            employee_id=a.employee_id,
            work_date=a.date,
            present=a.present,
            custom_type=a.custom_type.value if a.custom_type else None,
            custom_amount=a.custom_amount,
        )
        for a in dataset.attendance
    ]
    rows += [
        AdvanceEntry(
            advance_id=a.id,
            employee_id=a.employee_id,
            advance_date=a.date,
            amount=a.amount,
            description=a.description,
        )
        for a in dataset.advances
    ]
    rows += [
        SalaryPaymentEntry(
            payment_id=p.id,
            employee_id=p.employee_id,
            payment_date=p.payment_date,
            amount=p.amount,
            description=p.description,
        )
        for p in dataset.salary_payments or []
    ]
    return rows
