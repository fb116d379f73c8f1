import uuid

from fastapi import APIRouter

from cinelog.api.deps import LocalStorageDep
from cinelog.exceptions.base import AppError
from cinelog.exceptions.request_exceptions import MissingIdentifier
from cinelog.exceptions.review_exceptions import ReviewNotFound
from cinelog.local import reviews as local_reviews
from cinelog.local import watchlist as local_watchlist
from cinelog.schemas.review import ReviewInput, ReviewPublic
from cinelog.schemas.watchlist import (
    SuccessResponse,
    WatchlistCheck,
    WatchlistItemCreate,
    WatchlistItemPublic,
)

router = APIRouter(prefix="/local", tags=["local"])


@router.get("/reviews", response_model=list[ReviewPublic])
def get_local_reviews(storage: LocalStorageDep) -> list[ReviewPublic]:
    return local_reviews.get_all_reviews(storage=storage)


@router.get("/reviews/by-movie", response_model=ReviewPublic | None)
def get_local_review_by_movie(
    storage: LocalStorageDep, movie_id: int | None = None
) -> ReviewPublic | None:
    if movie_id is None:
        raise MissingIdentifier("movie_id")
    return local_reviews.get_review_by_movie_id(storage=storage, movie_id=movie_id)


@router.post("/reviews", response_model=ReviewPublic)
def save_local_review(storage: LocalStorageDep, review_in: ReviewInput) -> ReviewPublic:
    try:
        return local_reviews.save_review(storage=storage, review_in=review_in)
    except OSError as e:
        raise AppError from e


@router.put("/reviews/{review_id}", response_model=ReviewPublic)
def update_local_review(
    storage: LocalStorageDep, review_id: uuid.UUID, review_in: ReviewInput
) -> ReviewPublic:
    try:
        review = local_reviews.update_review(
            storage=storage, review_id=review_id, review_in=review_in
        )
    except OSError as e:
        raise AppError from e
    if review is None:
        raise ReviewNotFound(review_id)
    return review


@router.delete("/reviews/{review_id}", response_model=SuccessResponse)
def delete_local_review(
    storage: LocalStorageDep, review_id: uuid.UUID
) -> SuccessResponse:
    try:
        deleted = local_reviews.delete_review(storage=storage, review_id=review_id)
    except OSError as e:
        raise AppError from e
    if not deleted:
        raise ReviewNotFound(review_id)
    return SuccessResponse(success=True)


@router.get("/watchlist", response_model=list[WatchlistItemPublic])
def get_local_watchlist(storage: LocalStorageDep) -> list[WatchlistItemPublic]:
    return local_watchlist.get_watchlist(storage=storage)


@router.get("/watchlist/check", response_model=WatchlistCheck)
def check_local_watchlist(
    storage: LocalStorageDep, movie_id: int | None = None
) -> WatchlistCheck:
    if movie_id is None:
        raise MissingIdentifier("movie_id")
    return WatchlistCheck(
        is_in_watchlist=local_watchlist.is_in_watchlist(
            storage=storage, movie_id=movie_id
        )
    )


@router.post("/watchlist", response_model=SuccessResponse)
def add_to_local_watchlist(
    storage: LocalStorageDep, item_in: WatchlistItemCreate
) -> SuccessResponse:
    added = local_watchlist.add_to_watchlist(storage=storage, item_in=item_in)
    return SuccessResponse(success=added)


@router.delete("/watchlist", response_model=SuccessResponse)
def remove_from_local_watchlist(
    storage: LocalStorageDep, movie_id: int | None = None
) -> SuccessResponse:
    if movie_id is None:
        raise MissingIdentifier("movie_id")
    removed = local_watchlist.remove_from_watchlist(storage=storage, movie_id=movie_id)
    return SuccessResponse(success=removed)
