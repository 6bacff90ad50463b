"""/v1/accounts - credit accounts and their availability"""

import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from credit_ledger.api.v1.schemas import AccountCreate, AccountResponse, CreditAvailabilityResponse
from credit_ledger.api.dependencies import LedgerSnapshot, get_request_id, get_snapshot
from credit_ledger.infrastructure.database.session import get_db
from credit_ledger.infrastructure.database.repositories import AccountRepository
from credit_ledger.domain.credit import calculate_all_availability, calculate_credit_availability
from credit_ledger.domain.exceptions import AccountNotFoundError, DuplicateAccountError
from credit_ledger.domain.overlay import PaidMonthOverlay
from credit_ledger.infrastructure.observability.metrics import record_credit_lookup

router = APIRouter()


@router.post("/accounts", response_model=AccountResponse, status_code=201)
def create_account(request_body: AccountCreate, request: Request, db: Session = Depends(get_db)):
    """Register a credit account; a new account has no usage yet"""
    request_id = get_request_id(request)

    try:
        account = AccountRepository(db).create_account(request_body.name, request_body.limit)
        db.commit()
    except DuplicateAccountError as e:
        db.rollback()
        logging.warning(f"Duplicate account: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=409, detail=str(e))

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    availability = calculate_credit_availability(account, [], PaidMonthOverlay())
    return AccountResponse(
        id=account.id,
        name=account.name,
        limit=account.limit,
        usage=availability.usage,
        available=availability.available,
        utilization_percent=availability.utilization_percent,
    )


@router.get("/accounts", response_model=List[AccountResponse])
def list_accounts(snapshot: LedgerSnapshot = Depends(get_snapshot)):
    """
    List accounts with usage, available limit and utilization.

    Figures consider every expense on the account regardless of date.
    """
    figures = calculate_all_availability(snapshot.accounts, snapshot.transactions, snapshot.overlay)

    return [
        AccountResponse(
            id=account.id,
            name=account.name,
            limit=account.limit,
            usage=availability.usage,
            available=availability.available,
            utilization_percent=availability.utilization_percent,
        )
        for account, availability in zip(snapshot.accounts, figures)
    ]


@router.get("/accounts/{name}/credit", response_model=CreditAvailabilityResponse)
def get_credit_availability(
    name: str,
    request: Request,
    db: Session = Depends(get_db),
    snapshot: LedgerSnapshot = Depends(get_snapshot),
):
    """Usage and available limit of a single account"""
    request_id = get_request_id(request)

    try:
        account = AccountRepository(db).get_by_name(name)
    except AccountNotFoundError as e:
        record_credit_lookup(None)
        logging.warning(f"Credit lookup failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))

    availability = calculate_credit_availability(account, snapshot.transactions, snapshot.overlay)
    record_credit_lookup(availability.available)

    return CreditAvailabilityResponse(
        account_name=availability.account_name,
        limit=availability.limit,
        total_debt=availability.total_debt,
        paid_amount=availability.paid_amount,
        usage=availability.usage,
        available=availability.available,
        utilization_percent=availability.utilization_percent,
    )
