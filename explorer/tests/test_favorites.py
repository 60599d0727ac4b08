from __future__ import annotations

from explorer.favorites.store import is_favorite, toggle


def test_toggle_adds_missing_id():
    assert toggle(frozenset(), "louvre") == frozenset({"louvre"})


def test_toggle_removes_present_id():
    assert toggle({"louvre", "colosseum"}, "louvre") == frozenset({"colosseum"})


def test_toggle_twice_restores_original():
    for favorites in (frozenset(), frozenset({"a"}), frozenset({"a", "b", "c"})):
        for aid in ("a", "b", "z"):
            assert toggle(toggle(favorites, aid), aid) == favorites


def test_toggle_does_not_mutate_input():
    favorites = {"a"}
    toggle(favorites, "b")
    toggle(favorites, "a")
    assert favorites == {"a"}


def test_is_favorite():
    assert is_favorite({"a"}, "a")
    assert not is_favorite({"a"}, "b")
    assert not is_favorite(toggle({"a"}, "a"), "a")
