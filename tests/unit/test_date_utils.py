"""Unit tests for calendar month bucketing"""

from datetime import date, timedelta
from credit_ledger.utils.date_utils import add_months, is_month_key, month_key, month_range, month_window, months_until_max


def test_month_key_zero_pads_month():
    """Test YYYY-MM format with two-digit month"""
    assert month_key(date(2024, 3, 31)) == "2024-03"
    assert month_key(date(2024, 12, 1)) == "2024-12"


def test_month_key_ignores_day():
    assert month_key(date(2024, 5, 1)) == month_key(date(2024, 5, 31))


def test_month_key_order_matches_calendar_order():
    """Lexicographic order of keys follows chronological order"""
    start = date(2023, 6, 15)
    days = [start + timedelta(days=17 * i) for i in range(60)]

    for earlier, later in zip(days, days[1:]):
        if month_key(earlier) != month_key(later):
            assert month_key(earlier) < month_key(later)


def test_add_months_rolls_over_year():
    assert add_months(date(2024, 11, 30), 1) == date(2024, 12, 1)
    assert add_months(date(2024, 11, 30), 2) == date(2025, 1, 1)
    assert add_months(date(2024, 1, 31), 25) == date(2026, 2, 1)


def test_add_months_negative_offset():
    assert add_months(date(2024, 2, 10), -2) == date(2023, 12, 1)


def test_month_window_default_is_seven_months():
    """Test current month plus the following six"""
    window = month_window(date(2024, 9, 20))

    assert [m.month_key for m in window] == [
        "2024-09",
        "2024-10",
        "2024-11",
        "2024-12",
        "2025-01",
        "2025-02",
        "2025-03",
    ]


def test_month_window_count_zero():
    window = month_window(date(2024, 9, 20), 0)
    assert len(window) == 1
    assert window[0].month_key == "2024-09"


def test_month_window_labels():
    window = month_window(date(2024, 12, 1), 1, "%m/%y")
    assert [m.label for m in window] == ["12/24", "01/25"]


def test_month_range_centered():
    keys = [m.month_key for m in month_range(date(2025, 1, 10), 3, 3)]
    assert keys == ["2024-10", "2024-11", "2024-12", "2025-01", "2025-02", "2025-03", "2025-04"]


def test_is_month_key():
    assert is_month_key("2024-01")
    assert not is_month_key("2024-13")
    assert not is_month_key("2024-1")
    assert not is_month_key("2024_01")
    assert not is_month_key("abcd-ef")


def test_months_until_max():
    assert months_until_max(date(9999, 12, 31)) == 0
    assert months_until_max(date(9998, 12, 1)) == 12


def test_month_window_stops_at_last_representable_month():
    window = month_window(date(9999, 10, 1), 6)
    assert [m.month_key for m in window] == ["9999-10", "9999-11", "9999-12"]
