"""Credit availability - usage and remaining limit per account"""

from typing import List
from credit_ledger.domain.installments import installment_schedule, is_eligible
from credit_ledger.domain.models import Account, CreditAvailability, Transaction
from credit_ledger.domain.overlay import PaidMonthOverlay


def calculate_credit_availability(
    account: Account,
    transactions: List[Transaction],
    overlay: PaidMonthOverlay,
) -> CreditAvailability:
    """
    Net charged amount against acknowledged payments for one account.

    Considers every expense on the account regardless of date:
    - total_debt: full amounts of the account's expenses
    - paid_amount: installments whose month is marked paid for the account
    - usage: total_debt - paid_amount, floored at 0
    - available: limit - usage (negative when over the limit)
    - utilization_percent: usage / limit capped at 100, 0 when limit is 0
    """
    account_txns = [t for t in transactions if is_eligible(t, account.name)]
    total_debt = sum(t.amount for t in account_txns)

    paid_amount = sum(
        installment.amount
        for t in account_txns
        for installment in installment_schedule(t)
        if overlay.is_paid(account.name, installment.month_key)
    )

    usage = max(total_debt - paid_amount, 0)
    available = account.limit - usage
    utilization_percent = min(usage / account.limit * 100, 100) if account.limit > 0 else 0

    return CreditAvailability(
        account_name=account.name,
        limit=account.limit,
        total_debt=total_debt,
        paid_amount=paid_amount,
        usage=usage,
        available=available,
        utilization_percent=utilization_percent,
    )


def calculate_all_availability(
    accounts: List[Account],
    transactions: List[Transaction],
    overlay: PaidMonthOverlay,
) -> List[CreditAvailability]:
    """Availability for every account, in account order"""
    return [calculate_credit_availability(a, transactions, overlay) for a in accounts]
