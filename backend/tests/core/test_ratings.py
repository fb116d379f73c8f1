import math
from itertools import product

import pytest

from cinelog.core.ratings import (
    calculate_overall_rating,
    convert_to_star_rating,
    derive_ratings,
)
from cinelog.schemas.review import RatingCriteriaInput


def _ratings(story, acting, direction, cinematography, music):
    return {
        "story": story,
        "acting": acting,
        "direction": direction,
        "cinematography": cinematography,
        "music": music,
    }


def test_calculate_overall_rating_mixed_scores():
    ratings = _ratings(8, 6, 7, 9, 5)

    assert calculate_overall_rating(ratings) == 7
    assert convert_to_star_rating(7) == 3.5


@pytest.mark.parametrize(
    ("score", "overall", "stars"),
    [(10, 10, 5.0), (1, 1, 0.5)],
)
def test_uniform_scores_hit_the_ends_of_both_scales(score, overall, stars):
    ratings = _ratings(*([score] * 5))

    assert derive_ratings(ratings) == (overall, stars)


def test_calculate_overall_rating_rounds_half_up():
    # 1+1+1+1+4 = 8 -> 1.6 -> 2 ; 2+2+3+3+3 = 13 -> 2.6 -> 3
    assert calculate_overall_rating(_ratings(1, 1, 1, 1, 4)) == 2
    assert calculate_overall_rating(_ratings(2, 2, 3, 3, 3)) == 3
    # 1+1+1+2+2 = 7 -> 1.4 -> 1
    assert calculate_overall_rating(_ratings(1, 1, 1, 2, 2)) == 1


def test_calculate_overall_rating_accepts_models_and_ignores_overall():
    ratings = RatingCriteriaInput(
        story=10, acting=10, direction=10, cinematography=10, music=10, overall=1
    )

    assert calculate_overall_rating(ratings) == 10


def test_calculate_overall_rating_matches_rounded_mean_for_sampled_tuples():
    for values in product((1, 4, 5, 6, 10), repeat=5):
        overall = calculate_overall_rating(_ratings(*values))
        mean = sum(values) / 5

        assert isinstance(overall, int)
        assert 1 <= overall <= 10
        assert overall == math.floor(mean + 0.5)


def test_convert_to_star_rating_is_bounded_stepped_and_monotonic():
    stars = [convert_to_star_rating(overall) for overall in range(1, 11)]

    assert stars == [0.5, 1.0, 1.5, 2.0, 2.5, 3.0, 3.5, 4.0, 4.5, 5.0]
    assert stars == sorted(stars)
    for value in stars:
        assert 0.5 <= value <= 5.0
        assert round(value * 10) == pytest.approx(value * 10)
