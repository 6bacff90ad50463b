"""Data access layer - loads ledger snapshots as domain objects"""

from datetime import date
from typing import List, Optional
from sqlalchemy.orm import Session
from credit_ledger.infrastructure.database.models import (
    AccountRecord,
    TransactionRecord,
    PaidMonthRecord,
    WishlistItemRecord,
    AcquisitionRecord,
)
from credit_ledger.domain.models import Account, Acquisition, Transaction, WishlistItem
from credit_ledger.domain.wishlist import acquire
from credit_ledger.domain.overlay import PaidMonthOverlay
from credit_ledger.domain.exceptions import AccountNotFoundError, DuplicateAccountError, WishlistItemNotFoundError


class AccountRepository:
    """Repository for credit accounts"""

    def __init__(self, db: Session):
        self.db = db

    def create_account(self, name: str, limit: float) -> Account:
        """Register a new account; names are unique"""
        existing = self.db.query(AccountRecord).filter(AccountRecord.name == name).first()
        if existing:
            raise DuplicateAccountError(f"Account already exists: {name}")

        record = AccountRecord(name=name, credit_limit=limit)
        self.db.add(record)
        self.db.flush()  # Get ID without committing
        return self._to_domain(record)

    def list_accounts(self) -> List[Account]:
        records = self.db.query(AccountRecord).order_by(AccountRecord.id).all()
        return [self._to_domain(r) for r in records]

    def get_by_name(self, name: str) -> Account:
        """
        Fetch an account by its exact name.

        Raises:
            AccountNotFoundError: No account with that name
        """
        record = self.db.query(AccountRecord).filter(AccountRecord.name == name).first()
        if not record:
            raise AccountNotFoundError(f"Account not found: {name}")
        return self._to_domain(record)

    @staticmethod
    def _to_domain(record: AccountRecord) -> Account:
        return Account(id=record.id, name=record.name, limit=record.credit_limit)


class TransactionRepository:
    """Repository for ledger transactions"""

    def __init__(self, db: Session):
        self.db = db

    def create_transaction(self, txn: Transaction) -> Transaction:
        """Persist a transaction; the id of the input is ignored"""
        record = TransactionRecord(
            kind=txn.kind,
            account=txn.account,
            amount=txn.amount,
            transaction_date=txn.transaction_date,
            installment_count=txn.installment_count,
            first_payment_date=txn.first_payment_date,
            description=txn.description,
        )
        self.db.add(record)
        self.db.flush()
        return self._to_domain(record)

    def list_transactions(self, kind: Optional[str] = None) -> List[Transaction]:
        """Transactions in insertion order, optionally of a single kind"""
        query = self.db.query(TransactionRecord)
        if kind is not None:
            query = query.filter(TransactionRecord.kind == kind)
        return [self._to_domain(r) for r in query.order_by(TransactionRecord.id).all()]

    @staticmethod
    def _to_domain(record: TransactionRecord) -> Transaction:
        return Transaction(
            id=record.id,
            kind=record.kind,
            account=record.account,
            amount=record.amount,
            transaction_date=record.transaction_date,
            installment_count=record.installment_count,
            first_payment_date=record.first_payment_date,
            description=record.description or "",
        )


class PaidMonthRepository:
    """Repository for the paid-month overlay"""

    def __init__(self, db: Session):
        self.db = db

    def load_overlay(self) -> PaidMonthOverlay:
        """Snapshot of every paid mark"""
        rows = self.db.query(PaidMonthRecord.account_name, PaidMonthRecord.month_key).all()
        return PaidMonthOverlay((account_name, month_key) for account_name, month_key in rows)

    def toggle(self, account_name: str, month_key: str) -> bool:
        """Add or remove exactly one mark and return whether it is now paid"""
        record = (
            self.db.query(PaidMonthRecord)
            .filter(PaidMonthRecord.account_name == account_name)
            .filter(PaidMonthRecord.month_key == month_key)
            .first()
        )

        if record:
            self.db.delete(record)
            self.db.flush()
            return False

        self.db.add(PaidMonthRecord(account_name=account_name, month_key=month_key))
        self.db.flush()
        return True


class WishlistRepository:
    """Repository for wishlist items and acquisitions"""

    def __init__(self, db: Session):
        self.db = db

    def add_item(self, name: str, price: float, link: str = "") -> WishlistItem:
        record = WishlistItemRecord(name=name, price=price, link=link)
        self.db.add(record)
        self.db.flush()
        return self._item_to_domain(record)

    def list_items(self) -> List[WishlistItem]:
        records = self.db.query(WishlistItemRecord).order_by(WishlistItemRecord.id).all()
        return [self._item_to_domain(r) for r in records]

    def delete_item(self, item_id: int) -> None:
        self.db.delete(self._get_item_record(item_id))
        self.db.flush()

    def purchase(self, item_id: int, purchase_date: date) -> Acquisition:
        """
        Move an item from the wishlist to the acquisitions history.

        Raises:
            WishlistItemNotFoundError: No wishlist item with that id
        """
        record = self._get_item_record(item_id)
        acquisition = acquire(self._item_to_domain(record), purchase_date)

        acquisition_record = AcquisitionRecord(
            name=acquisition.name,
            link=acquisition.link,
            price=acquisition.price,
            purchase_date=acquisition.purchase_date,
        )
        self.db.add(acquisition_record)
        self.db.delete(record)
        self.db.flush()
        return self._acquisition_to_domain(acquisition_record)

    def list_acquisitions(self) -> List[Acquisition]:
        """Most recent purchases first"""
        records = (
            self.db.query(AcquisitionRecord)
            .order_by(AcquisitionRecord.purchase_date.desc(), AcquisitionRecord.id.desc())
            .all()
        )
        return [self._acquisition_to_domain(r) for r in records]

    def delete_acquisition(self, acquisition_id: int) -> None:
        record = self.db.query(AcquisitionRecord).filter(AcquisitionRecord.id == acquisition_id).first()
        if not record:
            raise WishlistItemNotFoundError(f"Acquisition not found: {acquisition_id}")
        self.db.delete(record)
        self.db.flush()

    def _get_item_record(self, item_id: int) -> WishlistItemRecord:
        record = self.db.query(WishlistItemRecord).filter(WishlistItemRecord.id == item_id).first()
        if not record:
            raise WishlistItemNotFoundError(f"Wishlist item not found: {item_id}")
        return record

    @staticmethod
    def _item_to_domain(record: WishlistItemRecord) -> WishlistItem:
        return WishlistItem(id=record.id, name=record.name, price=record.price, link=record.link or "")

    @staticmethod
    def _acquisition_to_domain(record: AcquisitionRecord) -> Acquisition:
        return Acquisition(
            id=record.id,
            name=record.name,
            price=record.price,
            purchase_date=record.purchase_date,
            link=record.link or "",
        )
