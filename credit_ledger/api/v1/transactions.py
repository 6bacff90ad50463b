"""/v1/transactions - record and list ledger transactions"""

import logging
from typing import List, Literal, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from credit_ledger.api.v1.schemas import TransactionCreate, TransactionResponse
from credit_ledger.api.dependencies import LedgerSnapshot, get_request_id, get_snapshot
from credit_ledger.infrastructure.database.session import get_db
from credit_ledger.infrastructure.database.repositories import TransactionRepository
from credit_ledger.domain.models import Transaction
from credit_ledger.domain.summary import account_purchases
from credit_ledger.domain.matrix import ALL_ACCOUNTS

router = APIRouter()


def to_transaction_response(txn: Transaction) -> TransactionResponse:
    return TransactionResponse(
        id=txn.id,
        kind=txn.kind,
        account=txn.account,
        amount=txn.amount,
        transaction_date=txn.transaction_date,
        installment_count=txn.installment_count,
        first_payment_date=txn.first_payment_date,
        description=txn.description,
    )


@router.post("/transactions", response_model=TransactionResponse, status_code=201)
def create_transaction(request_body: TransactionCreate, request: Request, db: Session = Depends(get_db)):
    """Record a transaction; amount is the total across all installments"""
    request_id = get_request_id(request)

    try:
        txn = TransactionRepository(db).create_transaction(
            Transaction(
                id=0,
                kind=request_body.kind,
                account=request_body.account,
                amount=request_body.amount,
                transaction_date=request_body.transaction_date,
                installment_count=request_body.installment_count,
                first_payment_date=request_body.first_payment_date,
                description=request_body.description,
            )
        )
        db.commit()

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    return to_transaction_response(txn)


@router.get("/transactions", response_model=List[TransactionResponse])
def list_transactions(
    kind: Optional[Literal["income", "expense", "saving"]] = Query(None, description="income, expense or saving"),
    db: Session = Depends(get_db),
):
    return [to_transaction_response(t) for t in TransactionRepository(db).list_transactions(kind)]


@router.get("/transactions/purchases", response_model=List[TransactionResponse])
def list_purchases(
    account: str = Query(ALL_ACCOUNTS, description='Account name or "all"'),
    snapshot: LedgerSnapshot = Depends(get_snapshot),
):
    """Expenses charged to registered accounts (card purchase detail)"""
    return [to_transaction_response(t) for t in account_purchases(snapshot.transactions, snapshot.accounts, account)]
