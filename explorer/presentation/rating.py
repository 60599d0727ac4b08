from __future__ import annotations

import math

from .models import MAX_STARS, RatingDisplay


def clamp_rating(raw: float) -> float:
    if math.isnan(raw):
        return 0.0
    return max(0.0, min(float(MAX_STARS), float(raw)))


def star_slots(filled_stars: int) -> list[bool]:
    """One entry per star slot; slot ``i`` is filled when ``i < filled_stars``."""
    return [i < filled_stars for i in range(MAX_STARS)]


def format_rating(clamped: float) -> str:
    return f"{clamped:.1f}"


def present_rating(raw: float) -> RatingDisplay:
    """
    Build the display values for a raw source rating.

    The rating is clamped to [0, 5] and shown as-is, never rescaled.
    Filled stars round half up, so 2.5 shows three stars.
    """
    clamped = clamp_rating(raw)
    filled = int(math.floor(clamped + 0.5))
    return RatingDisplay(
        clamped=clamped,
        filled_stars=filled,
        stars=star_slots(filled),
        label=format_rating(clamped),
    )
