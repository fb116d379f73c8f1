import uuid

from pydantic import TypeAdapter

from cinelog.core.ratings import derive_ratings
from cinelog.local import collection
from cinelog.local.storage import Storage
from cinelog.schemas.review import RatingCriteria, ReviewInput, ReviewPublic
from cinelog.utils import now_utc_naive

STORAGE_KEY = "movie_ratings_reviews"

_adapter = TypeAdapter(list[ReviewPublic])


def _load(storage: Storage) -> list[ReviewPublic]:
    return collection.load(storage, STORAGE_KEY, _adapter)


def _persist(storage: Storage, reviews: list[ReviewPublic]) -> None:
    collection.persist(storage, STORAGE_KEY, _adapter, reviews)


def _build(review_in: ReviewInput, *, base: ReviewPublic | None = None) -> ReviewPublic:
    overall, overall_star_rating = derive_ratings(review_in.ratings)
    now = now_utc_naive()
    return ReviewPublic(
        id=base.id if base else uuid.uuid4(),
        movie_id=base.movie_id if base else review_in.movie_id,
        movie_title=review_in.movie_title,
        movie_poster_path=review_in.movie_poster_path,
        movie_release_date=review_in.movie_release_date,
        comment=review_in.comment,
        ratings=RatingCriteria(
            **review_in.ratings.model_dump(exclude={"overall"}),
            overall=overall,
        ),
        overall_star_rating=overall_star_rating,
        created_at=base.created_at if base else now,
        updated_at=now,
    )


def get_all_reviews(*, storage: Storage) -> list[ReviewPublic]:
    """Return every review stored in this browser, newest first."""
    return sorted(_load(storage), key=lambda review: review.created_at, reverse=True)


def get_review_by_movie_id(*, storage: Storage, movie_id: int) -> ReviewPublic | None:
    return next(
        (review for review in _load(storage) if review.movie_id == movie_id), None
    )


def save_review(*, storage: Storage, review_in: ReviewInput) -> ReviewPublic:
    """
    Save a review in this browser.

    A browser holds at most one review per movie: saving a second review for
    the same movie replaces the first in place, keeping its id and created_at.

    Raises:
        OSError: If the storage medium cannot be written.
    """
    reviews = _load(storage)
    for index, existing in enumerate(reviews):
        if existing.movie_id == review_in.movie_id:
            review = _build(review_in, base=existing)
            reviews[index] = review
            break
    else:
        review = _build(review_in)
        reviews.append(review)

    _persist(storage, reviews)
    return review


def update_review(
    *,
    storage: Storage,
    review_id: uuid.UUID,
    review_in: ReviewInput,
) -> ReviewPublic | None:
    """
    Update a stored review by id.

    Returns:
        ReviewPublic | None: The updated review, or None if no review has this id.
    Raises:
        OSError: If the storage medium cannot be written.
    """
    reviews = _load(storage)
    for index, existing in enumerate(reviews):
        if existing.id == review_id:
            review = _build(review_in, base=existing)
            reviews[index] = review
            _persist(storage, reviews)
            return review
    return None


def delete_review(*, storage: Storage, review_id: uuid.UUID) -> bool:
    reviews = _load(storage)
    remaining = [review for review in reviews if review.id != review_id]
    if len(remaining) == len(reviews):
        return False

    _persist(storage, remaining)
    return True
