"""/v1/summary - totals per kind and monthly savings"""

from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Query

from credit_ledger.api.v1.schemas import SummaryResponse, SavingsResponse, SavingsPointSchema
from credit_ledger.api.dependencies import LedgerSnapshot, get_snapshot
from credit_ledger.domain.summary import summarize_transactions, monthly_savings
from credit_ledger.config import settings

router = APIRouter()


@router.get("/summary", response_model=SummaryResponse)
def get_summary(snapshot: LedgerSnapshot = Depends(get_snapshot)):
    """Income, expense and saving totals with the resulting balance"""
    summary = summarize_transactions(snapshot.transactions)
    return SummaryResponse(
        income=summary.income,
        expense=summary.expense,
        saving=summary.saving,
        balance=summary.balance,
    )


@router.get("/summary/savings", response_model=SavingsResponse)
def get_monthly_savings(
    center: Optional[date] = Query(None, description="Any day of the center month (default: today)"),
    snapshot: LedgerSnapshot = Depends(get_snapshot),
):
    """Savings per month, three months either side of the center month"""
    points = monthly_savings(
        snapshot.transactions,
        center or date.today(),
        label_format=settings.month_label_format,
    )
    return SavingsResponse(
        points=[
            SavingsPointSchema(month_key=p.month_key, label=p.label, total=p.total, is_current=p.is_current)
            for p in points
        ]
    )
