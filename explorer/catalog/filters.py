from __future__ import annotations

from collections.abc import Collection, Sequence

import pandas as pd

from .models import Attraction, FilterState


def _catalog_frame(catalog: Sequence[Attraction]) -> pd.DataFrame:
    """One row per attraction, positional index matching *catalog*."""
    return pd.DataFrame(
        {
            "id": [a.id for a in catalog],
            "category": [a.category.value for a in catalog],
            "name_lower": [a.name.lower() for a in catalog],
            "city_lower": [a.city.value.lower() for a in catalog],
        }
    )


def compute_visible(
    catalog: Sequence[Attraction],
    filter_state: FilterState,
    favorites: Collection[str],
) -> list[Attraction]:
    """Return the attractions that pass every active filter, in catalog order.

    - A selected category keeps only attractions of that category.
    - Non-empty search text keeps attractions whose name or city contains it,
      ignoring case.
    - Favorites-only keeps attractions whose id is in *favorites*.
    """
    if not catalog:
        return []

    df = _catalog_frame(catalog)
    mask = pd.Series(True, index=df.index)

    if filter_state.selected_category is not None:
        mask = mask & (df["category"] == filter_state.selected_category.value)

    if filter_state.search_text:
        needle = filter_state.search_text.lower()
        mask = mask & (
            df["name_lower"].str.contains(needle, regex=False)
            | df["city_lower"].str.contains(needle, regex=False)
        )

    if filter_state.show_favorites_only:
        mask = mask & df["id"].isin(list(favorites))

    return [catalog[i] for i in df.index[mask.to_numpy()]]
