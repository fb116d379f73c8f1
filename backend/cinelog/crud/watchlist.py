from uuid import UUID, uuid4

from sqlmodel import Session, col, select

from cinelog.crud.upsert import insert_on_conflict
from cinelog.models.watchlist_item import WatchlistItem
from cinelog.schemas.watchlist import WatchlistItemCreate
from cinelog.utils import now_utc_naive


def get_watchlist_item(
    *,
    session: Session,
    user_id: UUID,
    movie_id: int,
) -> WatchlistItem | None:
    stmt = select(WatchlistItem).where(
        WatchlistItem.user_id == user_id,
        WatchlistItem.movie_id == movie_id,
    )
    return session.exec(stmt).one_or_none()


def is_in_watchlist(
    *,
    session: Session,
    user_id: UUID,
    movie_id: int,
) -> bool:
    """
    Check if a user has added a movie to their watchlist.

    Parameters:
        session (Session): The database session.
        user_id (UUID): The ID of the user.
        movie_id (int): The metadata API id of the movie to check.
    Returns:
        bool: True if the movie is on the user's watchlist, otherwise False.
    """
    item = get_watchlist_item(session=session, user_id=user_id, movie_id=movie_id)
    return item is not None


def add_watchlist_item(
    *,
    session: Session,
    user_id: UUID,
    item_in: WatchlistItemCreate,
) -> WatchlistItem:
    """
    Add a movie to a user's watchlist.

    Adding a movie that is already on the watchlist refreshes its display
    fields and keeps the original added_at.

    Parameters:
        session (Session): The database session.
        user_id (UUID): The ID of the user.
        item_in (WatchlistItemCreate): The movie to add.
    Returns:
        WatchlistItem: The stored watchlist item.
    Raises:
        IntegrityError: If the user does not exist.
    """
    values = {
        "title": item_in.title,
        "poster_path": item_in.poster_path,
        "release_date": item_in.release_date,
        "overview": item_in.overview,
        "media_type": item_in.media_type,
    }
    stmt = insert_on_conflict(session, WatchlistItem).values(
        id=uuid4(),
        user_id=user_id,
        movie_id=item_in.id,
        added_at=now_utc_naive(),
        **values,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=["user_id", "movie_id"],
        set_=values,
    )
    session.flush()
    session.connection().execute(stmt)  # Raise Errors

    return session.exec(
        select(WatchlistItem)
        .where(
            WatchlistItem.user_id == user_id,
            WatchlistItem.movie_id == item_in.id,
        )
        .execution_options(populate_existing=True)
    ).one()


def remove_watchlist_item(
    *,
    session: Session,
    user_id: UUID,
    movie_id: int,
) -> bool:
    """
    Remove a movie from a user's watchlist.

    Returns:
        bool: True if the movie was on the watchlist, otherwise False.
    """
    item = get_watchlist_item(session=session, user_id=user_id, movie_id=movie_id)
    if item is None:
        return False

    session.delete(item)
    session.flush()
    return True


def get_watchlist(
    *,
    session: Session,
    user_id: UUID,
) -> list[WatchlistItem]:
    stmt = (
        select(WatchlistItem)
        .where(WatchlistItem.user_id == user_id)
        .order_by(col(WatchlistItem.added_at).desc())
    )
    items: list[WatchlistItem] = list(session.exec(stmt).all())
    return items
