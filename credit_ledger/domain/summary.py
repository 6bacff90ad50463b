"""Ledger summaries: totals by kind, savings per month, card purchases"""

from datetime import date
from typing import Dict, List
from credit_ledger.domain.models import (
    EXPENSE,
    INCOME,
    SAVING,
    Account,
    LedgerSummary,
    SavingsPoint,
    Transaction,
)
from credit_ledger.domain.matrix import ALL_ACCOUNTS
from credit_ledger.utils.date_utils import month_key, month_range


def summarize_transactions(transactions: List[Transaction]) -> LedgerSummary:
    """Full amounts per kind; balance is income minus expenses and savings"""
    income = sum(t.amount for t in transactions if t.kind == INCOME)
    expense = sum(t.amount for t in transactions if t.kind == EXPENSE)
    saving = sum(t.amount for t in transactions if t.kind == SAVING)

    return LedgerSummary(
        income=income,
        expense=expense,
        saving=saving,
        balance=income - expense - saving,
    )


def account_purchases(
    transactions: List[Transaction],
    accounts: List[Account],
    account_filter: str = ALL_ACCOUNTS,
) -> List[Transaction]:
    """Expenses charged to a known account, or to the filtered account only"""
    if account_filter == ALL_ACCOUNTS:
        names = {a.name for a in accounts}
    else:
        names = {account_filter}

    return [t for t in transactions if t.kind == EXPENSE and t.account in names]


def monthly_savings(
    transactions: List[Transaction],
    center: date,
    before: int = 3,
    after: int = 3,
    label_format: str = "%b %y",
) -> List[SavingsPoint]:
    """
    Savings totals per month around a center month.

    Savings are bucketed by the month of their transaction date; installments
    do not apply to them.
    """
    totals: Dict[str, float] = {}
    for t in transactions:
        if t.kind == SAVING:
            key = month_key(t.transaction_date)
            totals[key] = totals.get(key, 0.0) + t.amount

    center_key = month_key(center)
    return [
        SavingsPoint(
            month_key=m.month_key,
            label=m.label,
            total=totals.get(m.month_key, 0.0),
            is_current=m.month_key == center_key,
        )
        for m in month_range(center, before, after, label_format)
    ]
