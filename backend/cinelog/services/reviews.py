from logging import getLogger
from uuid import UUID

from sqlmodel import Session

from cinelog.converters import review as review_converters
from cinelog.crud import review as reviews_crud
from cinelog.exceptions.base import AppError
from cinelog.exceptions.review_exceptions import ReviewNotFound
from cinelog.schemas.review import ReviewInput, ReviewPublic

logger = getLogger(__name__)


def get_reviews(*, session: Session, user_id: UUID) -> list[ReviewPublic]:
    try:
        reviews = reviews_crud.get_reviews(session=session, user_id=user_id)
    except Exception as e:
        raise AppError from e
    return [review_converters.to_public(review) for review in reviews]


def get_review_by_movie_id(
    *,
    session: Session,
    user_id: UUID,
    movie_id: int,
) -> ReviewPublic | None:
    try:
        review = reviews_crud.get_review_by_movie_id(
            session=session, user_id=user_id, movie_id=movie_id
        )
    except Exception as e:
        raise AppError from e
    if review is None:
        return None
    return review_converters.to_public(review)


def save_review(
    *,
    session: Session,
    user_id: UUID,
    review_in: ReviewInput,
) -> ReviewPublic:
    """
    Create or replace the current user's review for a movie.
    Raises:
        AppError: If the review could not be stored.
    """
    try:
        review = reviews_crud.save_review(
            session=session, user_id=user_id, review_in=review_in
        )
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e
    logger.info("Saved review %s for movie %s", review.id, review.movie_id)
    return review_converters.to_public(review)


def update_review(
    *,
    session: Session,
    user_id: UUID,
    review_id: UUID,
    review_in: ReviewInput,
) -> ReviewPublic:
    """
    Update one of the current user's reviews.
    Raises:
        ReviewNotFound: If no review with this id belongs to the user.
        AppError: If the review could not be stored.
    """
    try:
        review = reviews_crud.update_review(
            session=session,
            user_id=user_id,
            review_id=review_id,
            review_in=review_in,
        )
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e
    if review is None:
        raise ReviewNotFound(review_id)
    return review_converters.to_public(review)


def delete_review(
    *,
    session: Session,
    user_id: UUID,
    review_id: UUID,
) -> None:
    """
    Delete one of the current user's reviews.
    Raises:
        ReviewNotFound: If no review with this id belongs to the user.
        AppError: If the review could not be deleted.
    """
    try:
        deleted = reviews_crud.delete_review(
            session=session, user_id=user_id, review_id=review_id
        )
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e
    if not deleted:
        raise ReviewNotFound(review_id)
