from uuid import UUID, uuid4

from sqlmodel import Session, col, select

from cinelog.core.ratings import derive_ratings
from cinelog.crud.upsert import insert_on_conflict
from cinelog.models.review import Review
from cinelog.schemas.review import ReviewInput
from cinelog.utils import now_utc_naive


def _review_values(review_in: ReviewInput) -> dict[str, object]:
    """
    Column values written for a review input. The submitted overall rating is
    discarded; both derived fields come from the five sub-ratings.
    """
    ratings = review_in.ratings
    overall, overall_star_rating = derive_ratings(ratings)
    return {
        "movie_title": review_in.movie_title,
        "movie_poster_path": review_in.movie_poster_path,
        "movie_release_date": review_in.movie_release_date,
        "comment": review_in.comment,
        "story": ratings.story,
        "acting": ratings.acting,
        "direction": ratings.direction,
        "cinematography": ratings.cinematography,
        "music": ratings.music,
        "overall": overall,
        "overall_star_rating": overall_star_rating,
    }


def get_review_by_movie_id(
    *,
    session: Session,
    user_id: UUID,
    movie_id: int,
) -> Review | None:
    """
    Get the review a user wrote for a movie.

    Parameters:
        session (Session): The database session.
        user_id (UUID): The ID of the owning user.
        movie_id (int): The metadata API id of the movie.
    Returns:
        Review | None: The review if the user has one for this movie, otherwise None.
    """
    stmt = select(Review).where(
        Review.user_id == user_id,
        Review.movie_id == movie_id,
    )
    return session.exec(stmt).one_or_none()


def get_reviews(
    *,
    session: Session,
    user_id: UUID,
) -> list[Review]:
    stmt = (
        select(Review)
        .where(Review.user_id == user_id)
        .order_by(col(Review.created_at).desc())
    )
    reviews: list[Review] = list(session.exec(stmt).all())
    return reviews


def save_review(
    *,
    session: Session,
    user_id: UUID,
    review_in: ReviewInput,
) -> Review:
    """
    Create or replace the user's review for a movie.

    An existing review for the same (user, movie) pair is overwritten and its
    updated_at refreshed; otherwise a new review is created with both
    timestamps set to now.

    Parameters:
        session (Session): The database session.
        user_id (UUID): The ID of the owning user.
        review_in (ReviewInput): The submitted review.
    Returns:
        Review: The stored review.
    Raises:
        IntegrityError: If the user does not exist.
    """
    values = _review_values(review_in)
    now = now_utc_naive()
    stmt = insert_on_conflict(session, Review).values(
        id=uuid4(),
        user_id=user_id,
        movie_id=review_in.movie_id,
        created_at=now,
        updated_at=now,
        **values,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=["user_id", "movie_id"],
        set_={**values, "updated_at": now},
    )
    session.flush()
    session.connection().execute(stmt)  # Raise Errors

    return session.exec(
        select(Review)
        .where(
            Review.user_id == user_id,
            Review.movie_id == review_in.movie_id,
        )
        .execution_options(populate_existing=True)
    ).one()


def update_review(
    *,
    session: Session,
    user_id: UUID,
    review_id: UUID,
    review_in: ReviewInput,
) -> Review | None:
    """
    Update a review by id, only if it belongs to the user.

    The movie a review is about never changes; the movie_id of the input is
    ignored here.

    Parameters:
        session (Session): The database session.
        user_id (UUID): The ID of the user making the change.
        review_id (UUID): The ID of the review to update.
        review_in (ReviewInput): The new review contents.
    Returns:
        Review | None: The updated review, or None if no review with this id
        belongs to the user.
    """
    stmt = select(Review).where(
        Review.id == review_id,
        Review.user_id == user_id,
    )
    review = session.exec(stmt).one_or_none()
    if review is None:
        return None

    review.sqlmodel_update(_review_values(review_in))
    review.updated_at = now_utc_naive()
    session.add(review)
    session.flush()
    return review


def delete_review(
    *,
    session: Session,
    user_id: UUID,
    review_id: UUID,
) -> bool:
    """
    Delete a review by id, only if it belongs to the user.

    Returns:
        bool: True if a review was deleted, otherwise False.
    """
    review = session.exec(
        select(Review).where(
            Review.id == review_id,
            Review.user_id == user_id,
        )
    ).one_or_none()
    if review is None:
        return False

    session.delete(review)
    session.flush()
    return True
