"""Dependency injection for FastAPI endpoints"""

from dataclasses import dataclass
from typing import List
from fastapi import Depends, Request
from sqlalchemy.orm import Session
from credit_ledger.domain.models import Account, Transaction
from credit_ledger.domain.overlay import PaidMonthOverlay
from credit_ledger.infrastructure.database.session import get_db
from credit_ledger.infrastructure.database.repositories import (
    AccountRepository,
    TransactionRepository,
    PaidMonthRepository,
)


@dataclass
class LedgerSnapshot:
    """Read snapshot handed to the pure domain functions"""

    transactions: List[Transaction]
    accounts: List[Account]
    overlay: PaidMonthOverlay


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_snapshot(db: Session = Depends(get_db)) -> LedgerSnapshot:
    """Load transactions, accounts and paid marks for one computation"""
    return LedgerSnapshot(
        transactions=TransactionRepository(db).list_transactions(),
        accounts=AccountRepository(db).list_accounts(),
        overlay=PaidMonthRepository(db).load_overlay(),
    )
