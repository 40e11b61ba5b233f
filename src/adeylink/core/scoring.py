"""Rating aggregation."""

from typing import Iterable, Protocol

from .constants import RatingConstants


class Rated(Protocol):
    rating: int


def average_rating(reviews: Iterable[Rated]) -> float:
    """Mean rating of the given reviews; 0.0 when there are none."""
    ratings = [r.rating for r in reviews]
    if not ratings:
        return RatingConstants.EMPTY_AVERAGE
    return sum(ratings) / len(ratings)


def format_rating(value: float) -> str:
    """One decimal place, as shown next to the star icon."""
    return f"{value:.1f}"


def is_valid_rating(value) -> bool:
    """Check a star rating is an integer in the allowed range."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return RatingConstants.MIN_RATING <= value <= RatingConstants.MAX_RATING
