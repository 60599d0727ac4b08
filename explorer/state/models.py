from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..catalog.models import Category, FilterState
from ..presentation.models import AttractionRow, FavoritesIcon

MAX_SEARCH_LENGTH = 200


class AppState(BaseModel):
    model_config = ConfigDict(frozen=True)

    filters: FilterState = Field(default_factory=FilterState)
    favorites: frozenset[str] = frozenset()
    revision: int = Field(default=0, ge=0)

    def to_session(self) -> dict[str, Any]:
        """JSON-safe form for the session cookie."""
        return {
            "filters": self.filters.model_dump(mode="json"),
            "favorites": sorted(self.favorites),
            "revision": self.revision,
        }


class ScreenSnapshot(BaseModel):
    rows: list[AttractionRow]
    filters: FilterState
    favorites_indicator: FavoritesIcon
    favorites_count: int
    total_attractions: int
    revision: int


class CategoryRequest(BaseModel):
    category: Category | None = None


class SearchRequest(BaseModel):
    text: str = Field(default="", max_length=MAX_SEARCH_LENGTH)


class FavoritesOnlyRequest(BaseModel):
    enabled: bool
