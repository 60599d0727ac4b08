from __future__ import annotations

from collections.abc import Collection, Iterable

from ..catalog.models import Attraction
from .models import AttractionRow
from .rating import present_rating


def present_row(attraction: Attraction, favorites: Collection[str]) -> AttractionRow:
    return AttractionRow(
        id=attraction.id,
        name=attraction.name,
        city=attraction.city,
        category=attraction.category,
        description=attraction.description,
        is_open=attraction.is_open,
        rating=present_rating(attraction.rating),
        is_favorite=attraction.id in favorites,
    )


def present_rows(
    attractions: Iterable[Attraction], favorites: Collection[str],
) -> list[AttractionRow]:
    return [present_row(a, favorites) for a in attractions]
