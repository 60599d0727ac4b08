from __future__ import annotations

from .models import FavoritesIcon


def icon_for(show_favorites_only: bool) -> FavoritesIcon:
    """Filled heart while the list is restricted to favorites, outline otherwise."""
    return FavoritesIcon.filled if show_favorites_only else FavoritesIcon.outline
