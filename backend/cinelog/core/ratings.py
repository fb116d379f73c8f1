from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

__all__ = [
    "CRITERIA",
    "calculate_overall_rating",
    "convert_to_star_rating",
    "derive_ratings",
]

CRITERIA = ("story", "acting", "direction", "cinematography", "music")


def _criterion(ratings: Any, name: str) -> int:
    if isinstance(ratings, Mapping):
        return int(ratings[name])
    return int(getattr(ratings, name))


def calculate_overall_rating(ratings: Any) -> int:
    """
    Average the five sub-ratings into an overall 1-10 rating.

    Parameters:
        ratings: A model or mapping exposing story, acting, direction,
            cinematography and music. Range checking is left to the caller.
    Returns:
        int: The arithmetic mean, rounded half-up to the nearest integer.
    """
    total = sum(_criterion(ratings, name) for name in CRITERIA)
    mean = Decimal(total) / Decimal(len(CRITERIA))
    return int(mean.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def convert_to_star_rating(overall: int) -> float:
    """
    Map an overall 1-10 rating onto the 0.5-5.0 star scale.

    Parameters:
        overall (int): The overall rating.
    Returns:
        float: overall / 10 * 5, rounded half-up to one decimal.
    """
    stars = Decimal(overall) / Decimal(10) * Decimal(5)
    return float(stars.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def derive_ratings(ratings: Any) -> tuple[int, float]:
    """
    Compute the stored (overall, overall_star_rating) pair for a review.

    Every writer goes through here so the two derived fields can always be
    reproduced from the sub-ratings alone.
    """
    overall = calculate_overall_rating(ratings)
    return overall, convert_to_star_rating(overall)
