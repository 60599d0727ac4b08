from __future__ import annotations

from collections.abc import Iterable


def toggle(favorites: Iterable[str], attraction_id: str) -> frozenset[str]:
    """Remove *attraction_id* if it is a favorite, otherwise add it.

    Returns a new set; applying the same toggle twice restores the input.
    """
    current = frozenset(favorites)
    if attraction_id in current:
        return current - {attraction_id}
    return current | {attraction_id}


def is_favorite(favorites: Iterable[str], attraction_id: str) -> bool:
    return attraction_id in frozenset(favorites)
