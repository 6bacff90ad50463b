"""GET /v1/reports - period report of transactions and expenses"""

from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from credit_ledger.api.v1.schemas import ReportResponse, CategoryTotalSchema
from credit_ledger.api.v1.payments import matrix_response
from credit_ledger.api.v1.transactions import to_transaction_response
from credit_ledger.api.dependencies import LedgerSnapshot, get_snapshot
from credit_ledger.domain.matrix import build_payment_matrix
from credit_ledger.domain.reports import expenses_by_category, transactions_in_range
from credit_ledger.domain.summary import account_purchases
from credit_ledger.config import settings

router = APIRouter()


@router.get("/reports", response_model=ReportResponse)
def get_report(
    start: Optional[date] = Query(None, description="First day of the period (default: 1st of this month)"),
    end: Optional[date] = Query(None, description="Last day of the period (default: today)"),
    snapshot: LedgerSnapshot = Depends(get_snapshot),
):
    """
    Period report.

    The date range applies to the transaction list and the category
    breakdown; card purchases and the payment matrix cover the whole ledger.
    """
    today = date.today()
    start = start or today.replace(day=1)
    end = end or today

    if start > end:
        raise HTTPException(status_code=422, detail="start must not be after end")

    categories = expenses_by_category(snapshot.transactions, snapshot.accounts, start, end)
    matrix = build_payment_matrix(
        snapshot.transactions,
        snapshot.accounts,
        snapshot.overlay,
        window_months=settings.projection_months,
        label_format=settings.month_label_format,
    )

    return ReportResponse(
        start=start,
        end=end,
        transactions=[to_transaction_response(t) for t in transactions_in_range(snapshot.transactions, start, end)],
        expenses_by_category=[CategoryTotalSchema(category=name, total=total) for name, total in categories.items()],
        card_transactions=[
            to_transaction_response(t) for t in account_purchases(snapshot.transactions, snapshot.accounts)
        ],
        matrix=matrix_response(matrix),
    )
