from uuid import UUID

from sqlmodel import Session

from cinelog.converters import watchlist as watchlist_converters
from cinelog.crud import watchlist as watchlist_crud
from cinelog.exceptions.base import AppError
from cinelog.schemas.watchlist import WatchlistItemCreate, WatchlistItemPublic


def get_watchlist(*, session: Session, user_id: UUID) -> list[WatchlistItemPublic]:
    try:
        items = watchlist_crud.get_watchlist(session=session, user_id=user_id)
    except Exception as e:
        raise AppError from e
    return [watchlist_converters.to_public(item) for item in items]


def is_in_watchlist(*, session: Session, user_id: UUID, movie_id: int) -> bool:
    try:
        return watchlist_crud.is_in_watchlist(
            session=session, user_id=user_id, movie_id=movie_id
        )
    except Exception as e:
        raise AppError from e


def add_to_watchlist(
    *,
    session: Session,
    user_id: UUID,
    item_in: WatchlistItemCreate,
) -> WatchlistItemPublic:
    """
    Add a movie to the current user's watchlist.
    Raises:
        AppError: If the item could not be stored.
    """
    try:
        item = watchlist_crud.add_watchlist_item(
            session=session, user_id=user_id, item_in=item_in
        )
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e
    return watchlist_converters.to_public(item)


def remove_from_watchlist(*, session: Session, user_id: UUID, movie_id: int) -> bool:
    """
    Remove a movie from the current user's watchlist.
    Returns:
        bool: False if the movie was not on the watchlist.
    Raises:
        AppError: If the item could not be deleted.
    """
    try:
        removed = watchlist_crud.remove_watchlist_item(
            session=session, user_id=user_id, movie_id=movie_id
        )
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e
    return removed
