"""Display formatting for the en-IN locale.

Currency strings use the rupee sign and Indian digit grouping
(``₹12,34,567``). Fraction digits are shown only when non-zero. Dates
use English month names in day-month-year order. Output never depends on
the process locale.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

from wage_reports.reconciliation.types import Month, as_date

RUPEE = "₹"

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
WEEKDAY_ABBR = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

_CENTS = Decimal("0.01")


def _group_indian(digits: str) -> str:
    """Group an unsigned integer string as 12,34,567."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_currency(amount: Decimal | int | str) -> str:
    """Format a rupee amount, e.g. ``₹3,300`` or ``-₹1,250.50``."""
    value = Decimal(amount).quantize(_CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    whole, _, fraction = f"{abs(value):f}".partition(".")
    text = RUPEE + _group_indian(whole)
    if fraction and fraction != "00":
        text += "." + fraction
    return sign + text


def format_balance(amount: Decimal | int) -> str:
    """Format a final balance.

    Zero shows as the bare formatted zero. Every other value, owed or
    overpaid, shows as ``+`` followed by its magnitude.
    """
    if amount == 0:
        return format_currency(0)
    return "+" + format_currency(abs(Decimal(amount)))


def format_long_date(value: date | datetime) -> str:
    """``15 January 2026``"""
    d = as_date(value)
    return f"{d.day} {MONTH_NAMES[d.month - 1]} {d.year}"


def format_short_date(value: date | datetime) -> str:
    """``Thu, 15 Jan``"""
    d = as_date(value)
    return f"{WEEKDAY_ABBR[d.weekday()]}, {d.day} {MONTH_NAMES[d.month - 1][:3]}"


def format_month(month: Month) -> str:
    """``January 2026``"""
    return f"{MONTH_NAMES[month.month - 1]} {month.year}"
