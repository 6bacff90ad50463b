"""Unit tests for the paid-month overlay"""

import pytest
from credit_ledger.domain.overlay import PaidMonthOverlay, flat_key, parse_flat_key
from credit_ledger.domain.exceptions import InvalidMonthKeyError


def test_new_overlay_is_empty():
    overlay = PaidMonthOverlay()
    assert len(overlay) == 0
    assert not overlay.is_paid("Visa", "2024-11")


def test_toggle_returns_new_state():
    overlay = PaidMonthOverlay()

    assert overlay.toggle("Visa", "2024-11") is True
    assert overlay.is_paid("Visa", "2024-11")
    assert overlay.toggle("Visa", "2024-11") is False
    assert not overlay.is_paid("Visa", "2024-11")


@pytest.mark.parametrize("initially_paid", [True, False])
def test_toggle_twice_restores_membership(initially_paid):
    """Test toggling is an involution"""
    overlay = PaidMonthOverlay([("Visa", "2024-11")] if initially_paid else [])

    overlay.toggle("Visa", "2024-11")
    overlay.toggle("Visa", "2024-11")

    assert overlay.is_paid("Visa", "2024-11") is initially_paid


def test_mark_and_unmark_are_idempotent():
    overlay = PaidMonthOverlay()

    overlay.mark("Visa", "2024-11")
    overlay.mark("Visa", "2024-11")
    assert len(overlay) == 1

    overlay.unmark("Visa", "2024-11")
    overlay.unmark("Visa", "2024-11")
    assert len(overlay) == 0


def test_marks_are_scoped_to_account():
    overlay = PaidMonthOverlay([("Visa", "2024-11")])
    assert ("Visa", "2024-11") in overlay
    assert not overlay.is_paid("Mastercard", "2024-11")


def test_flat_keys_roundtrip_with_separator_in_name():
    """Test account names containing "_" survive the flat format"""
    overlay = PaidMonthOverlay.from_keys(["Visa_2024-11", "Banco_Estado_2024-12"])

    assert overlay.is_paid("Visa", "2024-11")
    assert overlay.is_paid("Banco_Estado", "2024-12")
    assert not overlay.is_paid("Banco", "Estado_2024-12")
    assert overlay.to_keys() == ["Banco_Estado_2024-12", "Visa_2024-11"]


def test_flat_key_format():
    assert flat_key("Visa", "2024-11") == "Visa_2024-11"


@pytest.mark.parametrize("key", ["Visa2024-11", "Visa_2024-13", "Visa_nov"])
def test_parse_flat_key_rejects_malformed(key):
    with pytest.raises(InvalidMonthKeyError):
        parse_flat_key(key)
