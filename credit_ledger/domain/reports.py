"""Period reports: transactions in a date range and expenses per category"""

from datetime import date
from typing import Dict, List
from credit_ledger.domain.models import EXPENSE, Account, Transaction


def transactions_in_range(transactions: List[Transaction], start: date, end: date) -> List[Transaction]:
    """Transactions dated between start and end, both inclusive"""
    return [t for t in transactions if start <= t.transaction_date <= end]


def expenses_by_category(
    transactions: List[Transaction],
    accounts: List[Account],
    start: date,
    end: date,
) -> Dict[str, float]:
    """
    Sum expenses in the period per category, leaving out card purchases.

    Card purchases (expenses whose label names a registered account) show up
    in the payment matrix instead. Categories keep first-seen order.
    """
    card_names = {a.name for a in accounts}

    totals: Dict[str, float] = {}
    for t in transactions_in_range(transactions, start, end):
        if t.kind == EXPENSE and t.account not in card_names:
            totals[t.account] = totals.get(t.account, 0.0) + t.amount
    return totals
