from fastapi import APIRouter

from cinelog.api.deps import (
    AnonymousIdHeader,
    CurrentUser,
    LocalStorageRootDep,
    OptionalUser,
    SessionDep,
    local_storage_for,
)
from cinelog.exceptions.request_exceptions import MissingIdentifier
from cinelog.local import watchlist as local_watchlist
from cinelog.schemas.watchlist import (
    SuccessResponse,
    WatchlistCheck,
    WatchlistItemCreate,
    WatchlistItemPublic,
)
from cinelog.services import watchlist as watchlist_service

router = APIRouter(prefix="/watchlist", tags=["watchlist"])


@router.get("/", response_model=list[WatchlistItemPublic])
def get_watchlist(
    session: SessionDep, current_user: CurrentUser
) -> list[WatchlistItemPublic]:
    return watchlist_service.get_watchlist(session=session, user_id=current_user.id)


@router.get("/check", response_model=WatchlistCheck)
def check_watchlist(
    session: SessionDep,
    current_user: OptionalUser,
    root: LocalStorageRootDep,
    movie_id: int | None = None,
    anonymous_id: AnonymousIdHeader = None,
) -> WatchlistCheck:
    """
    Check whether a movie is on the caller's watchlist.

    Signed-in callers are answered from their account; anyone else from the
    browser storage named by the anonymous id header.
    """
    if movie_id is None:
        raise MissingIdentifier("movie_id")
    if current_user is not None:
        is_in_list = watchlist_service.is_in_watchlist(
            session=session, user_id=current_user.id, movie_id=movie_id
        )
    else:
        is_in_list = local_watchlist.is_in_watchlist(
            storage=local_storage_for(root, anonymous_id), movie_id=movie_id
        )
    return WatchlistCheck(is_in_watchlist=is_in_list)


@router.post("/", response_model=WatchlistItemPublic)
def add_to_watchlist(
    *, session: SessionDep, current_user: CurrentUser, item_in: WatchlistItemCreate
) -> WatchlistItemPublic:
    return watchlist_service.add_to_watchlist(
        session=session, user_id=current_user.id, item_in=item_in
    )


@router.delete("/", response_model=SuccessResponse)
def remove_from_watchlist(
    session: SessionDep,
    current_user: CurrentUser,
    movie_id: int | None = None,
) -> SuccessResponse:
    if movie_id is None:
        raise MissingIdentifier("movie_id")
    removed = watchlist_service.remove_from_watchlist(
        session=session, user_id=current_user.id, movie_id=movie_id
    )
    return SuccessResponse(success=removed)
