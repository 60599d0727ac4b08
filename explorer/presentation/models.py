from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from ..catalog.models import Category, City

MAX_STARS = 5


class FavoritesIcon(str, Enum):
    filled = "heart.fill"
    outline = "heart"


class RatingDisplay(BaseModel):
    clamped: float = Field(..., ge=0.0, le=5.0)
    filled_stars: int = Field(..., ge=0, le=MAX_STARS)
    stars: list[bool] = Field(default_factory=list)
    label: str = ""


class AttractionRow(BaseModel):
    id: str
    name: str
    city: City
    category: Category
    description: str
    is_open: bool
    rating: RatingDisplay
    is_favorite: bool
