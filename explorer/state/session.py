from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..catalog.models import Attraction, Category, FilterState
from . import intents
from .models import AppState, ScreenSnapshot

logger = logging.getLogger(__name__)

Listener = Callable[[ScreenSnapshot], None]


class ExplorerSession:
    """Owns the current AppState for one user and re-renders on change.

    Each intent method swaps in the next state revision, recomputes the
    snapshot and calls every subscriber with it, synchronously and in
    subscription order. Intents that leave the state unchanged do not notify.
    A failing subscriber does not stop the others; once all have run, the
    first error is re-raised and the new state stays in place.
    """

    def __init__(
        self,
        catalog: Sequence[Attraction],
        state: AppState | None = None,
    ) -> None:
        self._catalog = tuple(catalog)
        self._state = state or AppState()
        self._snapshot = intents.build_snapshot(self._catalog, self._state)
        self._listeners: list[Listener] = []

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def snapshot(self) -> ScreenSnapshot:
        return self._snapshot

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; the returned callable removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def is_favorite(self, attraction_id: str) -> bool:
        return intents.is_favorite(self._state, attraction_id)

    # -- intents -----------------------------------------------------------

    def select_category(self, category: Category | None) -> ScreenSnapshot:
        return self._apply(intents.select_category(self._state, category))

    def set_search_text(self, text: str) -> ScreenSnapshot:
        return self._apply(intents.set_search_text(self._state, text))

    def set_show_favorites_only(self, enabled: bool) -> ScreenSnapshot:
        return self._apply(intents.set_show_favorites_only(self._state, enabled))

    def toggle_favorite(self, attraction_id: str) -> ScreenSnapshot:
        return self._apply(intents.toggle_favorite(self._state, attraction_id))

    def reset(self) -> ScreenSnapshot:
        if self._state.filters == FilterState() and not self._state.favorites:
            return self._snapshot
        return self._apply(AppState(revision=self._state.revision + 1))

    def _apply(self, new_state: AppState) -> ScreenSnapshot:
        if new_state == self._state:
            return self._snapshot
        self._state = new_state
        self._snapshot = intents.build_snapshot(self._catalog, new_state)
        logger.debug(
            "State revision %d: %d visible", new_state.revision, len(self._snapshot.rows),
        )
        errors: list[Exception] = []
        for listener in list(self._listeners):
            try:
                listener(self._snapshot)
            except Exception as exc:
                logger.warning("Snapshot listener %r failed", listener, exc_info=True)
                errors.append(exc)
        if errors:
            raise errors[0]
        return self._snapshot
