"""Unit tests for period reports"""

from datetime import date
from credit_ledger.domain.models import Transaction
from credit_ledger.domain.reports import expenses_by_category, transactions_in_range


def expense(id: int, category: str, amount: float, on: date) -> Transaction:
    return Transaction(id=id, kind="expense", account=category, amount=amount, transaction_date=on)


def test_transactions_in_range_is_inclusive(sample_transactions):
    selected = transactions_in_range(sample_transactions, date(2024, 11, 1), date(2024, 11, 20))

    assert [t.id for t in selected] == [3, 4, 5]


def test_expenses_by_category_excludes_cards(visa, mastercard, sample_transactions):
    """Card purchases belong to the payment matrix, not the breakdown"""
    totals = expenses_by_category(sample_transactions, [visa, mastercard], date(2024, 10, 1), date(2024, 12, 31))

    assert totals == {"Cash": 40.0}


def test_expenses_by_category_groups_and_filters_dates(visa):
    transactions = [
        expense(1, "Food", 30.0, date(2024, 11, 2)),
        expense(2, "Transport", 10.0, date(2024, 11, 3)),
        expense(3, "Food", 20.0, date(2024, 11, 30)),
        expense(4, "Food", 99.0, date(2024, 12, 1)),
        expense(5, "Visa", 500.0, date(2024, 11, 5)),
        Transaction(id=6, kind="income", account="Food", amount=5.0, transaction_date=date(2024, 11, 4)),
    ]

    totals = expenses_by_category(transactions, [visa], date(2024, 11, 1), date(2024, 11, 30))

    assert totals == {"Food": 50.0, "Transport": 10.0}
    assert list(totals) == ["Food", "Transport"]


def test_expenses_by_category_empty_period(visa, sample_transactions):
    assert expenses_by_category(sample_transactions, [visa], date(2030, 1, 1), date(2030, 1, 31)) == {}
