"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

INCOME = "income"
EXPENSE = "expense"
SAVING = "saving"
TRANSACTION_KINDS = (INCOME, EXPENSE, SAVING)


@dataclass
class Transaction:
    """Ledger entry; amount is the full price, not a per-installment amount"""

    id: int
    kind: str  # "income", "expense" or "saving"
    account: str  # Free-text label, matched against Account.name
    amount: float
    transaction_date: date
    installment_count: Optional[int] = None
    first_payment_date: Optional[date] = None
    description: str = ""

    @property
    def effective_installments(self) -> int:
        """Absent or non-positive installment counts mean a single payment"""
        if self.installment_count and self.installment_count > 0:
            return self.installment_count
        return 1

    @property
    def effective_first_payment(self) -> date:
        return self.first_payment_date or self.transaction_date

    @property
    def installment_amount(self) -> float:
        return self.amount / self.effective_installments


@dataclass
class Account:
    """Credit account (card) with its credit ceiling"""

    id: int
    name: str
    limit: float


@dataclass
class Installment:
    """Single monthly slice of a transaction"""

    month_key: str
    amount: float


@dataclass
class MonthDescriptor:
    """Column header of the payment matrix"""

    month_key: str
    label: str  # Cosmetic only


@dataclass
class PaymentCell:
    """Projected amount for one account in one month"""

    amount: float
    is_paid: bool
    account: str
    month_key: str


@dataclass
class AccountRow:
    """Cells for one account, aligned with the matrix months"""

    account_name: str
    cells: List[PaymentCell] = field(default_factory=list)


@dataclass
class PaymentMatrix:
    """Account x month projection of installments"""

    months: List[MonthDescriptor]
    rows: List[AccountRow]
    totals: List[float]
    monthly_payment_status: List[bool]


@dataclass
class CreditAvailability:
    """Usage and remaining limit of an account"""

    account_name: str
    limit: float
    total_debt: float
    paid_amount: float
    usage: float
    available: float
    utilization_percent: float


@dataclass
class LedgerSummary:
    """Totals per transaction kind"""

    income: float
    expense: float
    saving: float
    balance: float


@dataclass
class SavingsPoint:
    """Savings total for a single month"""

    month_key: str
    label: str
    total: float
    is_current: bool


@dataclass
class WishlistItem:
    """Something being saved for"""

    id: int
    name: str
    price: float
    link: str = ""


@dataclass
class Acquisition:
    """Wishlist item that was bought"""

    id: int
    name: str
    price: float
    purchase_date: date
    link: str = ""


@dataclass
class WishProgress:
    """How far total savings go toward a wishlist item"""

    item: WishlistItem
    progress_percent: float
    can_afford: bool
