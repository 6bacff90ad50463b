"""SQLAlchemy ORM models for accounts, transactions and paid-month marks"""

from sqlalchemy import Column, String, Float, DateTime, Date, Integer, Text, UniqueConstraint
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class AccountRecord(Base):
    """Credit account (card) and its limit"""

    __tablename__ = "account"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, unique=True)
    credit_limit = Column(Float, nullable=False, default=0.0)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class TransactionRecord(Base):
    """Income, expense or saving entry"""

    __tablename__ = "ledger_transaction"

    id = Column(Integer, primary_key=True, autoincrement=True)
    kind = Column(String(16), nullable=False, index=True)
    account = Column(Text, nullable=False, index=True)  # Joined to account.name by value, not FK
    amount = Column(Float, nullable=False)
    transaction_date = Column(Date, nullable=False)
    installment_count = Column(Integer, nullable=True)
    first_payment_date = Column(Date, nullable=True)
    description = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class PaidMonthRecord(Base):
    """One user-declared paid mark for an (account, month) pair"""

    __tablename__ = "paid_month"
    __table_args__ = (UniqueConstraint("account_name", "month_key", name="uq_paid_month_account_month"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    account_name = Column(Text, nullable=False)
    month_key = Column(String(7), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class WishlistItemRecord(Base):
    """Item the user is saving for"""

    __tablename__ = "wishlist_item"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    link = Column(Text, nullable=False, default="")
    price = Column(Float, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class AcquisitionRecord(Base):
    """Wishlist item moved to the purchase history"""

    __tablename__ = "acquisition"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    link = Column(Text, nullable=False, default="")
    price = Column(Float, nullable=False)
    purchase_date = Column(Date, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
