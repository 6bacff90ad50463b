"""GET /v1/payments/matrix - installment projection per account and month"""

import time
from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request

from credit_ledger.api.v1.schemas import PaymentMatrixResponse, MonthSchema, RowSchema, CellSchema
from credit_ledger.api.dependencies import LedgerSnapshot, get_request_id, get_snapshot
from credit_ledger.domain.matrix import ALL_ACCOUNTS, build_payment_matrix
from credit_ledger.domain.models import PaymentMatrix
from credit_ledger.infrastructure.observability.metrics import record_matrix_build
from credit_ledger.infrastructure.observability.logging import log_matrix_built
from credit_ledger.config import settings

router = APIRouter()


def matrix_response(matrix: PaymentMatrix) -> PaymentMatrixResponse:
    return PaymentMatrixResponse(
        months=[MonthSchema(month_key=m.month_key, label=m.label) for m in matrix.months],
        rows=[
            RowSchema(
                account_name=row.account_name,
                cells=[
                    CellSchema(amount=c.amount, is_paid=c.is_paid, account=c.account, month_key=c.month_key)
                    for c in row.cells
                ],
            )
            for row in matrix.rows
        ],
        totals=matrix.totals,
        monthly_payment_status=matrix.monthly_payment_status,
    )


@router.get("/payments/matrix", response_model=PaymentMatrixResponse)
def get_payment_matrix(
    request: Request,
    account: str = Query(ALL_ACCOUNTS, description='Account name or "all"'),
    months: int = Query(settings.projection_months, ge=0, le=60, description="Months after the reference month"),
    reference: Optional[date] = Query(None, description="Any day of the first month (default: today)"),
    snapshot: LedgerSnapshot = Depends(get_snapshot),
):
    """
    Project every expense installment onto an (account x month) grid.

    Flow:
    1. Load transactions, accounts and paid marks (snapshot dependency)
    2. Build the matrix for the reference month plus the following months
    3. Return cells, per-month totals and per-month fully-paid flags
    """
    start_time = time.perf_counter()
    request_id = get_request_id(request)

    matrix = build_payment_matrix(
        snapshot.transactions,
        snapshot.accounts,
        snapshot.overlay,
        account_filter=account,
        reference=reference,
        window_months=months,
        label_format=settings.month_label_format,
    )

    duration = time.perf_counter() - start_time
    record_matrix_build(account, duration)
    log_matrix_built(request_id, account, len(matrix.rows), len(matrix.months), duration * 1000)

    return matrix_response(matrix)
