from cinelog.models.review import Review
from cinelog.schemas.review import RatingCriteria, ReviewPublic


def to_public(review: Review) -> ReviewPublic:
    """
    Convert a stored Review into its public shape, folding the sub-ratings
    and the derived overall rating into a nested ratings object.

    Parameters:
        review (Review): The Review row to convert.
    Returns:
        ReviewPublic: The converted review.
    Raises:
        ValidationError: If the review data is invalid.
    """
    Review.model_validate(review)
    return ReviewPublic(
        id=review.id,
        movie_id=review.movie_id,
        movie_title=review.movie_title,
        movie_poster_path=review.movie_poster_path,
        movie_release_date=review.movie_release_date,
        comment=review.comment,
        ratings=RatingCriteria(
            story=review.story,
            acting=review.acting,
            direction=review.direction,
            cinematography=review.cinematography,
            music=review.music,
            overall=review.overall,
        ),
        overall_star_rating=review.overall_star_rating,
        created_at=review.created_at,
        updated_at=review.updated_at,
    )
