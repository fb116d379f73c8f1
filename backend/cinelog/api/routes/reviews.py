import uuid

from fastapi import APIRouter

from cinelog.api.deps import CurrentUser, SessionDep
from cinelog.exceptions.request_exceptions import MissingIdentifier
from cinelog.schemas.review import ReviewInput, ReviewPublic
from cinelog.schemas.watchlist import SuccessResponse
from cinelog.services import reviews as reviews_service

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.get("/", response_model=list[ReviewPublic])
def get_reviews(session: SessionDep, current_user: CurrentUser) -> list[ReviewPublic]:
    return reviews_service.get_reviews(session=session, user_id=current_user.id)


@router.get("/by-movie", response_model=ReviewPublic | None)
def get_review_by_movie(
    session: SessionDep,
    current_user: CurrentUser,
    movie_id: int | None = None,
) -> ReviewPublic | None:
    if movie_id is None:
        raise MissingIdentifier("movie_id")
    return reviews_service.get_review_by_movie_id(
        session=session, user_id=current_user.id, movie_id=movie_id
    )


@router.post("/", response_model=ReviewPublic)
def save_review(
    *, session: SessionDep, current_user: CurrentUser, review_in: ReviewInput
) -> ReviewPublic:
    """
    Create the current user's review for a movie, or replace it if one exists.
    """
    return reviews_service.save_review(
        session=session, user_id=current_user.id, review_in=review_in
    )


@router.put("/{review_id}", response_model=ReviewPublic)
def update_review(
    *,
    session: SessionDep,
    current_user: CurrentUser,
    review_id: uuid.UUID,
    review_in: ReviewInput,
) -> ReviewPublic:
    return reviews_service.update_review(
        session=session,
        user_id=current_user.id,
        review_id=review_id,
        review_in=review_in,
    )


@router.delete("/{review_id}", response_model=SuccessResponse)
def delete_review(
    *, session: SessionDep, current_user: CurrentUser, review_id: uuid.UUID
) -> SuccessResponse:
    reviews_service.delete_review(
        session=session, user_id=current_user.id, review_id=review_id
    )
    return SuccessResponse(success=True)
