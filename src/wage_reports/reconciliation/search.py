"""Employee search filter."""

from __future__ import annotations

from collections.abc import Iterable

from wage_reports.reconciliation.types import Employee


def filter_employees(employees: Iterable[Employee], term: str | None) -> list[Employee]:
    """Case-insensitive substring match on name or designation.

    An empty term matches everyone. Returns a new list in input order.
    """
    needle = (term or "").lower()
    return [
        e for e in employees
        if needle in e.name.lower() or needle in e.designation.lower()
    ]
