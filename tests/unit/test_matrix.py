"""Unit tests for the payment matrix builder"""

from datetime import date
from credit_ledger.domain.models import Account, Transaction
from credit_ledger.domain.overlay import PaidMonthOverlay
from credit_ledger.domain.matrix import build_payment_matrix, filter_accounts

REFERENCE = date(2024, 11, 15)


def purchase(account: str, amount: float, installments: int | None, first_payment: date) -> Transaction:
    return Transaction(
        id=0,
        kind="expense",
        account=account,
        amount=amount,
        transaction_date=first_payment,
        installment_count=installments,
        first_payment_date=first_payment,
    )


def amounts(matrix, row_index=0):
    return [cell.amount for cell in matrix.rows[row_index].cells]


def test_window_defaults_to_seven_months():
    matrix = build_payment_matrix([], [Account(1, "Visa", 100.0)], PaidMonthOverlay(), reference=REFERENCE)

    assert len(matrix.months) == 7
    assert matrix.months[0].month_key == "2024-11"
    assert matrix.months[-1].month_key == "2025-05"
    assert len(matrix.totals) == len(matrix.monthly_payment_status) == 7


def test_scenario_three_installments_from_first_month(visa):
    """300 in 3 installments lands 100 in each of the first three months"""
    txn = purchase("Visa", 300.0, 3, date(2024, 11, 5))

    matrix = build_payment_matrix([txn], [visa], PaidMonthOverlay(), reference=REFERENCE)

    assert amounts(matrix) == [100.0, 100.0, 100.0, 0, 0, 0, 0]


def test_single_payment_fills_exactly_one_cell(visa):
    txn = purchase("Visa", 80.0, None, date(2025, 2, 28))

    matrix = build_payment_matrix([txn], [visa], PaidMonthOverlay(), reference=REFERENCE)

    assert amounts(matrix) == [0, 0, 0, 80.0, 0, 0, 0]


def test_installments_before_window_are_excluded(visa):
    txn = purchase("Visa", 600.0, 6, date(2024, 8, 1))  # Aug..Jan

    matrix = build_payment_matrix([txn], [visa], PaidMonthOverlay(), reference=REFERENCE)

    assert amounts(matrix) == [100.0, 100.0, 100.0, 0, 0, 0, 0]


def test_cells_sum_all_transactions(visa, sample_transactions):
    extra = purchase("Visa", 50.0, 2, date(2024, 12, 1))

    matrix = build_payment_matrix(sample_transactions + [extra], [visa], PaidMonthOverlay(), reference=REFERENCE)

    assert amounts(matrix)[:3] == [100.0, 125.0, 125.0]


def test_unknown_account_and_non_expenses_do_not_appear(visa, mastercard, sample_transactions):
    matrix = build_payment_matrix(sample_transactions, [visa, mastercard], PaidMonthOverlay(), reference=REFERENCE)

    assert [row.account_name for row in matrix.rows] == ["Visa", "Mastercard"]
    assert amounts(matrix, 1) == [0, 120.0, 0, 0, 0, 0, 0]
    assert matrix.totals == [100.0, 220.0, 100.0, 0, 0, 0, 0]


def test_account_filter(visa, mastercard, sample_transactions):
    matrix = build_payment_matrix(
        sample_transactions, [visa, mastercard], PaidMonthOverlay(), account_filter="Mastercard", reference=REFERENCE
    )

    assert [row.account_name for row in matrix.rows] == ["Mastercard"]
    assert matrix.totals[1] == 120.0


def test_filter_accounts_unknown_name_is_empty(visa, mastercard):
    assert filter_accounts([visa, mastercard], "Amex") == []
    assert filter_accounts([visa, mastercard]) == [visa, mastercard]


def test_is_paid_is_independent_of_amount(visa):
    """A month without debt can still be marked paid"""
    overlay = PaidMonthOverlay([("Visa", "2025-03")])

    matrix = build_payment_matrix([], [visa], overlay, reference=REFERENCE)
    cell = matrix.rows[0].cells[4]

    assert cell.month_key == "2025-03"
    assert cell.amount == 0
    assert cell.is_paid is True
    assert matrix.monthly_payment_status[4] is False


def test_scenario_no_transactions_never_fully_paid(visa):
    matrix = build_payment_matrix([], [visa], PaidMonthOverlay(), reference=REFERENCE)

    assert all(cell.amount == 0 for cell in matrix.rows[0].cells)
    assert matrix.monthly_payment_status == [False] * 7


def test_scenario_fully_paid_requires_every_account_with_debt(visa, mastercard):
    """Two accounts with debt in the same month: both must be marked"""
    transactions = [
        purchase("Visa", 90.0, None, date(2024, 12, 10)),
        purchase("Mastercard", 45.0, None, date(2024, 12, 20)),
    ]
    overlay = PaidMonthOverlay([("Visa", "2024-12")])

    matrix = build_payment_matrix(transactions, [visa, mastercard], overlay, reference=REFERENCE)
    assert matrix.monthly_payment_status[1] is False

    overlay.mark("Mastercard", "2024-12")
    matrix = build_payment_matrix(transactions, [visa, mastercard], overlay, reference=REFERENCE)
    assert matrix.monthly_payment_status[1] is True


def test_account_without_debt_does_not_block_fully_paid(visa, mastercard):
    transactions = [purchase("Visa", 90.0, None, date(2024, 11, 10))]
    overlay = PaidMonthOverlay([("Visa", "2024-11")])

    matrix = build_payment_matrix(transactions, [visa, mastercard], overlay, reference=REFERENCE)

    assert matrix.monthly_payment_status[0] is True


def test_build_is_idempotent(visa, mastercard, sample_transactions):
    overlay = PaidMonthOverlay([("Visa", "2024-11")])
    args = (sample_transactions, [visa, mastercard], overlay)

    assert build_payment_matrix(*args, reference=REFERENCE) == build_payment_matrix(*args, reference=REFERENCE)
    assert len(overlay) == 1
