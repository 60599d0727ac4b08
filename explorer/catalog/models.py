from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class City(str, Enum):
    paris = "Paris"
    rome = "Rome"
    barcelona = "Barcelona"
    berlin = "Berlin"


class Category(str, Enum):
    food = "Food"
    museum = "Museum"
    sports = "Sports"
    historical = "Historical"


class Attraction(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    city: City
    category: Category
    description: str = ""
    # Raw source value; clamping happens at presentation time.
    rating: float
    is_open: bool = True


class FilterState(BaseModel):
    model_config = ConfigDict(frozen=True)

    selected_category: Category | None = None
    search_text: str = ""
    show_favorites_only: bool = False


class CatalogError(ValueError):
    """Raised when the seed catalog cannot be turned into Attraction records."""


class UnknownAttractionError(KeyError):
    """Raised when an attraction id is not part of the catalog."""

    def __init__(self, attraction_id: str) -> None:
        super().__init__(attraction_id)
        self.attraction_id = attraction_id
