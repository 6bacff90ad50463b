"""Payment matrix builder - account x month projection of installments"""

from datetime import date
from typing import List
from credit_ledger.domain.installments import installment_contribution
from credit_ledger.domain.models import Account, AccountRow, PaymentCell, PaymentMatrix, Transaction
from credit_ledger.domain.overlay import PaidMonthOverlay
from credit_ledger.utils.date_utils import month_window

ALL_ACCOUNTS = "all"


def filter_accounts(accounts: List[Account], account_filter: str = ALL_ACCOUNTS) -> List[Account]:
    """All accounts for the "all" sentinel, otherwise exact name matches"""
    if account_filter == ALL_ACCOUNTS:
        return list(accounts)
    return [a for a in accounts if a.name == account_filter]


def build_payment_matrix(
    transactions: List[Transaction],
    accounts: List[Account],
    overlay: PaidMonthOverlay,
    account_filter: str = ALL_ACCOUNTS,
    reference: date | None = None,
    window_months: int = 6,
    label_format: str = "%b %y",
) -> PaymentMatrix:
    """
    Aggregate installment contributions into an (account x month) table.

    Requirements:
    - Window covers the reference month plus window_months following months
    - Cell amount sums every transaction's contribution to that account/month
    - Cell is_paid is a plain overlay lookup, unrelated to the amount
    - Month totals sum the displayed rows
    - A month is fully paid only if some row has debt in it and every row
      with debt is marked paid; a month without debt is not fully paid
    """
    if reference is None:
        reference = date.today()

    months = month_window(reference, window_months, label_format)

    rows = []
    for account in filter_accounts(accounts, account_filter):
        cells = [
            PaymentCell(
                amount=sum(installment_contribution(t, account.name, m.month_key) for t in transactions),
                is_paid=overlay.is_paid(account.name, m.month_key),
                account=account.name,
                month_key=m.month_key,
            )
            for m in months
        ]
        rows.append(AccountRow(account_name=account.name, cells=cells))

    totals = [sum(row.cells[index].amount for row in rows) for index in range(len(months))]

    monthly_payment_status = []
    for index in range(len(months)):
        cells_with_debt = [row.cells[index] for row in rows if row.cells[index].amount > 0]
        monthly_payment_status.append(bool(cells_with_debt) and all(c.is_paid for c in cells_with_debt))

    return PaymentMatrix(
        months=months,
        rows=rows,
        totals=totals,
        monthly_payment_status=monthly_payment_status,
    )
