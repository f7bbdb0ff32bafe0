"""
Opening hours validation.

A slot covers the half-open interval [open_at, close_at) on its day, so a
slot closing at 12:00 and another opening at 12:00 do not overlap.
"""

from itertools import combinations
from typing import Iterable, List, Tuple

from shopapp.models.shop import OpeningHoursShop


def overlaps(h1: OpeningHoursShop, h2: OpeningHoursShop) -> bool:
    """Return True if both slots are on the same day and their intervals intersect."""
    if h1.day != h2.day:
        return False
    return h1.open_at < h2.close_at and h2.open_at < h1.close_at


def find_conflicts(
    entries: Iterable[OpeningHoursShop],
) -> List[Tuple[OpeningHoursShop, OpeningHoursShop]]:
    """List every unordered pair of distinct entries that overlap."""
    return [(h1, h2) for h1, h2 in combinations(list(entries), 2) if overlaps(h1, h2)]


def has_conflict(entries: Iterable[OpeningHoursShop]) -> bool:
    return any(overlaps(h1, h2) for h1, h2 in combinations(list(entries), 2))
