"""Installment projection of expense transactions onto calendar months"""

from typing import List
from credit_ledger.domain.models import EXPENSE, Installment, Transaction
from credit_ledger.utils.date_utils import add_months, month_key, months_until_max


def installment_schedule(txn: Transaction) -> List[Installment]:
    """
    Split a transaction into equal monthly installments.

    Rules:
    - Absent or non-positive installment count means a single payment
    - Each installment is amount / n, unrounded (no remainder correction)
    - Installment i falls in the month of the first payment date + i months;
      only year and month of that date matter
    - Installments past the last representable month (9999-12) are dropped

    Example:
        300.0 in 3 installments from 2024-11-15
        → [("2024-11", 100.0), ("2024-12", 100.0), ("2025-01", 100.0)]
    """
    monthly_amount = txn.installment_amount
    first_payment = txn.effective_first_payment
    count = min(txn.effective_installments, months_until_max(first_payment) + 1)

    return [
        Installment(month_key=month_key(add_months(first_payment, i)), amount=monthly_amount)
        for i in range(count)
    ]


def is_eligible(txn: Transaction, account_name: str) -> bool:
    """Only expenses charged to the account (exact name match) take part"""
    return txn.kind == EXPENSE and txn.account == account_name


def installment_contribution(txn: Transaction, account_name: str, target_month_key: str) -> float:
    """Amount the transaction adds to one account/month cell"""
    if not is_eligible(txn, account_name):
        return 0.0

    # Installment months are pairwise distinct, so at most one can match
    for installment in installment_schedule(txn):
        if installment.month_key == target_month_key:
            return installment.amount

    return 0.0
