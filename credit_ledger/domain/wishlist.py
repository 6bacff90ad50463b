"""Wishlist progress against accumulated savings"""

from datetime import date
from typing import List
from credit_ledger.domain.models import SAVING, Acquisition, Transaction, WishlistItem, WishProgress


def total_savings(transactions: List[Transaction]) -> float:
    """All saving entries, regardless of date"""
    return sum(t.amount for t in transactions if t.kind == SAVING)


def wishlist_progress(items: List[WishlistItem], savings: float) -> List[WishProgress]:
    """
    Progress of every item against the same savings pool.

    Items are not cumulative: each is compared with the full savings total.
    Progress is capped at 100; a free item counts as reached.
    """
    return [
        WishProgress(
            item=item,
            progress_percent=min(savings / item.price * 100, 100) if item.price > 0 else 100,
            can_afford=savings >= item.price,
        )
        for item in items
    ]


def acquire(item: WishlistItem, purchase_date: date) -> Acquisition:
    """Record a wishlist item as bought on the given date"""
    return Acquisition(
        id=item.id,
        name=item.name,
        price=item.price,
        purchase_date=purchase_date,
        link=item.link,
    )
