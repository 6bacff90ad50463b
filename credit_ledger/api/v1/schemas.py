"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from typing import List, Literal, Optional


class AccountCreate(BaseModel):
    """Request body for POST /v1/accounts"""

    name: str = Field(..., min_length=1, description="Account (card) name, used as join key")
    limit: float = Field(..., ge=0, description="Credit ceiling")


class AccountResponse(BaseModel):
    """Account with its current credit figures"""

    id: int
    name: str
    limit: float
    usage: float
    available: float
    utilization_percent: float


class CreditAvailabilityResponse(BaseModel):
    """Response for GET /v1/accounts/{name}/credit"""

    account_name: str
    limit: float
    total_debt: float
    paid_amount: float
    usage: float
    available: float
    utilization_percent: float


class TransactionCreate(BaseModel):
    """Request body for POST /v1/transactions"""

    kind: Literal["income", "expense", "saving"]
    account: str = Field(..., description="Account name for expenses, category otherwise")
    amount: float = Field(..., ge=0, description="Total amount across all installments")
    transaction_date: date
    installment_count: Optional[int] = Field(None, le=600, description="Absent or <= 0 means a single payment")
    first_payment_date: Optional[date] = None
    description: str = ""


class TransactionResponse(BaseModel):
    """Single ledger transaction"""

    id: int
    kind: str
    account: str
    amount: float
    transaction_date: date
    installment_count: Optional[int] = None
    first_payment_date: Optional[date] = None
    description: str


class MonthSchema(BaseModel):
    """Matrix column header"""

    month_key: str
    label: str


class CellSchema(BaseModel):
    """Single account/month cell"""

    amount: float
    is_paid: bool
    account: str
    month_key: str


class RowSchema(BaseModel):
    """Cells of one account, aligned with months"""

    account_name: str
    cells: List[CellSchema]


class PaymentMatrixResponse(BaseModel):
    """Response for GET /v1/payments/matrix"""

    months: List[MonthSchema]
    rows: List[RowSchema]
    totals: List[float]
    monthly_payment_status: List[bool]


class ToggleRequest(BaseModel):
    """Request body for POST /v1/paid-months/toggle"""

    account_name: str = Field(..., min_length=1)
    month_key: str = Field(..., description="YYYY-MM")


class ToggleResponse(BaseModel):
    """New membership state of the toggled mark"""

    account_name: str
    month_key: str
    is_paid: bool


class PaidMonthsResponse(BaseModel):
    """Response for GET /v1/paid-months"""

    keys: List[str]


class SummaryResponse(BaseModel):
    """Response for GET /v1/summary"""

    income: float
    expense: float
    saving: float
    balance: float


class SavingsPointSchema(BaseModel):
    """Savings total for one month"""

    month_key: str
    label: str
    total: float
    is_current: bool


class SavingsResponse(BaseModel):
    """Response for GET /v1/summary/savings"""

    points: List[SavingsPointSchema]


class WishlistItemCreate(BaseModel):
    """Request body for POST /v1/wishlist"""

    name: str = Field(..., min_length=1)
    price: float = Field(..., gt=0)
    link: str = ""


class WishlistItemResponse(BaseModel):
    """Wishlist item with progress against total savings"""

    id: int
    name: str
    price: float
    link: str
    progress_percent: float
    can_afford: bool


class WishlistResponse(BaseModel):
    """Response for GET /v1/wishlist"""

    total_savings: float
    items: List[WishlistItemResponse]


class PurchaseRequest(BaseModel):
    """Request body for POST /v1/wishlist/{item_id}/purchase"""

    purchase_date: Optional[date] = Field(None, description="Defaults to today")


class AcquisitionResponse(BaseModel):
    """Bought wishlist item"""

    id: int
    name: str
    price: float
    link: str
    purchase_date: date


class CategoryTotalSchema(BaseModel):
    """Expense total for one non-card category"""

    category: str
    total: float


class ReportResponse(BaseModel):
    """Response for GET /v1/reports"""

    start: date
    end: date
    transactions: List[TransactionResponse]
    expenses_by_category: List[CategoryTotalSchema]
    card_transactions: List[TransactionResponse]
    matrix: PaymentMatrixResponse
