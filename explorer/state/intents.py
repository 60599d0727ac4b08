from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from ..catalog.filters import compute_visible
from ..catalog.models import Attraction, Category, FilterState
from ..favorites import store as favorites_store
from ..presentation.icons import icon_for
from ..presentation.models import FavoritesIcon
from ..presentation.rows import present_rows
from .models import AppState, ScreenSnapshot

logger = logging.getLogger(__name__)


def _next(state: AppState, **changes: Any) -> AppState:
    filter_changes = {k: v for k, v in changes.items() if k != "favorites"}
    filters = (
        FilterState.model_validate({**state.filters.model_dump(), **filter_changes})
        if filter_changes
        else state.filters
    )
    favorites = changes.get("favorites", state.favorites)
    if filters == state.filters and favorites == state.favorites:
        return state
    return AppState(filters=filters, favorites=favorites, revision=state.revision + 1)


# ---------------------------------------------------------------------------
# Intents
# ---------------------------------------------------------------------------


def select_category(state: AppState, category: Category | None) -> AppState:
    logger.debug("select_category %s", category)
    return _next(state, selected_category=category)


def set_search_text(state: AppState, text: str) -> AppState:
    logger.debug("set_search_text %r", text)
    return _next(state, search_text=text)


def set_show_favorites_only(state: AppState, enabled: bool) -> AppState:
    logger.debug("set_show_favorites_only %s", enabled)
    return _next(state, show_favorites_only=enabled)


def toggle_favorite(state: AppState, attraction_id: str) -> AppState:
    logger.debug("toggle_favorite %s", attraction_id)
    return _next(state, favorites=favorites_store.toggle(state.favorites, attraction_id))


# ---------------------------------------------------------------------------
# Derived values
# ---------------------------------------------------------------------------


def visible_attractions(catalog: Sequence[Attraction], state: AppState) -> list[Attraction]:
    return compute_visible(catalog, state.filters, state.favorites)


def is_favorite(state: AppState, attraction_id: str) -> bool:
    return favorites_store.is_favorite(state.favorites, attraction_id)


def favorites_indicator(state: AppState) -> FavoritesIcon:
    return icon_for(state.filters.show_favorites_only)


def build_snapshot(catalog: Sequence[Attraction], state: AppState) -> ScreenSnapshot:
    """Everything a view needs to draw the list for *state*."""
    visible = visible_attractions(catalog, state)
    return ScreenSnapshot(
        rows=present_rows(visible, state.favorites),
        filters=state.filters,
        favorites_indicator=favorites_indicator(state),
        favorites_count=len(state.favorites),
        total_attractions=len(catalog),
        revision=state.revision,
    )
