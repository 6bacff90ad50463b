"""Calendar month bucketing utilities"""

from datetime import date
from typing import List
from credit_ledger.domain.models import MonthDescriptor


def month_key(d: date) -> str:
    """Canonical YYYY-MM key, zero-padded so string order matches calendar order"""
    return f"{d.year:04d}-{d.month:02d}"


def add_months(d: date, months: int) -> date:
    """Shift the (year, month) pair of a date, normalized to the 1st of the month"""
    index = d.year * 12 + (d.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def months_until_max(d: date) -> int:
    """Whole months between the month of d and the last representable month"""
    return (date.max.year * 12 + date.max.month - 1) - (d.year * 12 + d.month - 1)


def month_label(d: date, fmt: str = "%b %y") -> str:
    """Short month + 2-digit year label, display only"""
    return d.strftime(fmt)


def month_window(reference: date, count: int = 6, label_format: str = "%b %y") -> List[MonthDescriptor]:
    """
    Enumerate count + 1 consecutive months starting at the reference month.

    Example:
        month_window(date(2024, 11, 20), 3)
        → 2024-11, 2024-12, 2025-01, 2025-02

    The window stops at 9999-12.
    """
    months = []
    for offset in range(min(count, months_until_max(reference)) + 1):
        d = add_months(reference, offset)
        months.append(MonthDescriptor(month_key=month_key(d), label=month_label(d, label_format)))
    return months


def month_range(center: date, before: int, after: int, label_format: str = "%b %y") -> List[MonthDescriptor]:
    """Months from center - before to center + after (inclusive)"""
    return month_window(add_months(center, -before), before + after, label_format)


def is_month_key(value: str) -> bool:
    """Check that a string is a well-formed YYYY-MM key"""
    if len(value) != 7 or value[4] != "-":
        return False
    year, month = value[:4], value[5:]
    if not (year.isdigit() and month.isdigit()):
        return False
    return 1 <= int(month) <= 12
