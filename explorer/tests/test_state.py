from __future__ import annotations

import pytest
from pydantic import ValidationError

from explorer.catalog.models import Attraction, Category, City
from explorer.presentation.models import FavoritesIcon
from explorer.state import intents
from explorer.state.models import AppState
from explorer.state.session import ExplorerSession

A = Attraction(id="a", name="Le Petit Bistro", city=City.paris, category=Category.food, rating=4.8)
B = Attraction(id="b", name="Capitoline Museums", city=City.rome, category=Category.museum, rating=0.0)
CATALOG = (A, B)


def _visible_ids(catalog, state):
    return [a.id for a in intents.visible_attractions(catalog, state)]


# ── Reducers ─────────────────────────────────────────────────────────────


class TestIntents:
    def test_default_state(self):
        state = AppState()
        assert state.filters.selected_category is None
        assert state.filters.search_text == ""
        assert state.filters.show_favorites_only is False
        assert state.favorites == frozenset()
        assert state.revision == 0

    def test_intents_return_new_revision(self):
        state = AppState()
        nxt = intents.select_category(state, Category.food)
        assert nxt is not state
        assert nxt.revision == 1
        assert nxt.filters.selected_category is Category.food
        assert state.filters.selected_category is None

    def test_noop_intent_returns_same_state(self):
        state = intents.set_search_text(AppState(), "rome")
        assert intents.set_search_text(state, "rome") is state
        assert intents.set_show_favorites_only(AppState(), False).revision == 0

    def test_clear_category(self):
        state = intents.select_category(AppState(), Category.museum)
        state = intents.select_category(state, None)
        assert state.filters.selected_category is None
        assert state.revision == 2

    def test_toggle_favorite_round_trip(self):
        state = intents.toggle_favorite(AppState(), "a")
        assert intents.is_favorite(state, "a")
        state = intents.toggle_favorite(state, "a")
        assert not intents.is_favorite(state, "a")
        assert state.favorites == frozenset()

    def test_favorites_indicator_follows_flag(self):
        state = AppState()
        assert intents.favorites_indicator(state) is FavoritesIcon.outline
        state = intents.set_show_favorites_only(state, True)
        assert intents.favorites_indicator(state) is FavoritesIcon.filled

    def test_scenario(self):
        state = intents.select_category(AppState(), Category.food)
        assert _visible_ids(CATALOG, state) == ["a"]

        state = intents.select_category(state, None)
        state = intents.set_search_text(state, "rome")
        assert _visible_ids(CATALOG, state) == ["b"]

        state = intents.set_search_text(state, "")
        state = intents.toggle_favorite(state, "a")
        state = intents.set_show_favorites_only(state, True)
        assert _visible_ids(CATALOG, state) == ["a"]

        state = intents.toggle_favorite(state, "a")
        assert _visible_ids(CATALOG, state) == []

    def test_snapshot(self):
        state = intents.toggle_favorite(AppState(), "b")
        snapshot = intents.build_snapshot(CATALOG, state)
        assert [r.id for r in snapshot.rows] == ["a", "b"]
        assert [r.is_favorite for r in snapshot.rows] == [False, True]
        assert snapshot.favorites_indicator is FavoritesIcon.outline
        assert snapshot.favorites_count == 1
        assert snapshot.total_attractions == 2
        assert snapshot.revision == 1

    def test_session_payload_round_trip(self):
        state = intents.toggle_favorite(AppState(), "b")
        state = intents.toggle_favorite(state, "a")
        state = intents.select_category(state, Category.museum)
        payload = state.to_session()
        assert payload["favorites"] == ["a", "b"]
        assert payload["filters"]["selected_category"] == "Museum"
        assert AppState.model_validate(payload) == state


# ── ExplorerSession ──────────────────────────────────────────────────────


class TestExplorerSession:
    def test_initial_snapshot_lists_catalog(self):
        session = ExplorerSession(CATALOG)
        assert [r.id for r in session.snapshot.rows] == ["a", "b"]
        assert session.snapshot.revision == 0

    def test_subscribers_are_notified_after_each_change(self):
        session = ExplorerSession(CATALOG)
        seen = []
        session.subscribe(seen.append)

        session.select_category(Category.food)
        session.set_search_text("bistro")

        assert len(seen) == 2
        assert [r.id for r in seen[0].rows] == ["a"]
        assert seen[1].filters.search_text == "bistro"
        assert seen[-1] is session.snapshot

    def test_noop_intent_does_not_notify(self):
        session = ExplorerSession(CATALOG)
        seen = []
        session.subscribe(seen.append)
        session.set_show_favorites_only(False)
        session.select_category(None)
        session.reset()
        assert seen == []

    def test_unsubscribe(self):
        session = ExplorerSession(CATALOG)
        seen = []
        unsubscribe = session.subscribe(seen.append)
        session.toggle_favorite("a")
        unsubscribe()
        unsubscribe()
        session.toggle_favorite("a")
        assert len(seen) == 1

    def test_favorites_flow(self):
        session = ExplorerSession(CATALOG)
        session.toggle_favorite("a")
        assert session.is_favorite("a")
        snapshot = session.set_show_favorites_only(True)
        assert [r.id for r in snapshot.rows] == ["a"]
        assert snapshot.favorites_indicator is FavoritesIcon.filled

        snapshot = session.toggle_favorite("a")
        assert snapshot.rows == []
        assert not session.is_favorite("a")

    def test_reset_restores_defaults(self):
        session = ExplorerSession(CATALOG)
        session.toggle_favorite("b")
        session.set_search_text("zzz")
        snapshot = session.reset()
        assert len(snapshot.rows) == 2
        assert session.state.favorites == frozenset()
        assert session.state.filters.search_text == ""
        assert session.state.revision == 3

    def test_resumes_from_existing_state(self):
        state = intents.set_show_favorites_only(AppState(), True)
        session = ExplorerSession(CATALOG, state)
        assert session.snapshot.rows == []
        assert session.snapshot.favorites_indicator is FavoritesIcon.filled


class TestInputCoercion:
    def test_string_category_is_validated_into_enum(self):
        state = intents.select_category(AppState(), "Food")
        assert state.filters.selected_category is Category.food
        assert _visible_ids(CATALOG, state) == ["a"]

    def test_unknown_category_is_rejected(self):
        with pytest.raises(ValidationError):
            intents.select_category(AppState(), "Shopping")

    def test_session_accepts_string_category(self):
        session = ExplorerSession(CATALOG)
        snapshot = session.select_category("Museum")
        assert [r.id for r in snapshot.rows] == ["b"]
        assert session.state.filters.selected_category is Category.museum


def test_failing_listener_does_not_block_others():
    session = ExplorerSession(CATALOG)
    seen = []

    def broken(snapshot):
        raise RuntimeError("render failed")

    session.subscribe(broken)
    session.subscribe(seen.append)

    with pytest.raises(RuntimeError, match="render failed"):
        session.toggle_favorite("a")

    assert len(seen) == 1
    assert session.is_favorite("a")
    assert session.state.revision == 1
