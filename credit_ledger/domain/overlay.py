"""Paid-month overlay: user-declared (account, month) payment marks"""

from typing import Iterable, Iterator, List, Set, Tuple
from credit_ledger.domain.exceptions import InvalidMonthKeyError
from credit_ledger.utils.date_utils import is_month_key

KEY_SEPARATOR = "_"

OverlayKey = Tuple[str, str]


def flat_key(account_name: str, month_key: str) -> str:
    """Legacy flat form: account name + "_" + month key"""
    return f"{account_name}{KEY_SEPARATOR}{month_key}"


def parse_flat_key(key: str) -> OverlayKey:
    """
    Split a flat key back into (account_name, month_key).

    Splits on the last separator: month keys never contain one, so account
    names that do are still recovered intact.
    """
    account_name, sep, month = key.rpartition(KEY_SEPARATOR)
    if not sep or not is_month_key(month):
        raise InvalidMonthKeyError(f"Malformed paid-month key: {key!r}")
    return account_name, month


class PaidMonthOverlay:
    """Set of (account_name, month_key) pairs marked as paid"""

    def __init__(self, keys: Iterable[OverlayKey] = ()):
        self._keys: Set[OverlayKey] = set(keys)

    @classmethod
    def from_keys(cls, keys: Iterable[str]) -> "PaidMonthOverlay":
        return cls(parse_flat_key(key) for key in keys)

    def to_keys(self) -> List[str]:
        return sorted(flat_key(account_name, month) for account_name, month in self._keys)

    def is_paid(self, account_name: str, month_key: str) -> bool:
        return (account_name, month_key) in self._keys

    def mark(self, account_name: str, month_key: str) -> None:
        self._keys.add((account_name, month_key))

    def unmark(self, account_name: str, month_key: str) -> None:
        self._keys.discard((account_name, month_key))

    def toggle(self, account_name: str, month_key: str) -> bool:
        """Flip membership of one key and return the new state"""
        if self.is_paid(account_name, month_key):
            self.unmark(account_name, month_key)
            return False
        self.mark(account_name, month_key)
        return True

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __iter__(self) -> Iterator[OverlayKey]:
        return iter(sorted(self._keys))

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"PaidMonthOverlay({sorted(self._keys)!r})"
