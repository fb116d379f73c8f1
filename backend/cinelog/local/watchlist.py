from logging import getLogger

from pydantic import TypeAdapter

from cinelog.local import collection
from cinelog.local.storage import Storage
from cinelog.schemas.watchlist import WatchlistItemCreate, WatchlistItemPublic
from cinelog.utils import now_utc_naive

logger = getLogger(__name__)

STORAGE_KEY = "movie_ratings_watchlist"

_adapter = TypeAdapter(list[WatchlistItemPublic])


def _load(storage: Storage) -> list[WatchlistItemPublic]:
    return collection.load(storage, STORAGE_KEY, _adapter)


def get_watchlist(*, storage: Storage) -> list[WatchlistItemPublic]:
    """Return the browser's watchlist, most recently added first."""
    return sorted(_load(storage), key=lambda item: item.added_at, reverse=True)


def is_in_watchlist(*, storage: Storage, movie_id: int) -> bool:
    return any(item.id == movie_id for item in _load(storage))


def add_to_watchlist(*, storage: Storage, item_in: WatchlistItemCreate) -> bool:
    """
    Add a movie to the browser's watchlist.

    Returns:
        bool: False if the movie is already on the watchlist or the
        watchlist could not be written, otherwise True.
    """
    watchlist = _load(storage)
    if any(item.id == item_in.id for item in watchlist):
        return False

    watchlist.append(
        WatchlistItemPublic(**item_in.model_dump(), added_at=now_utc_naive())
    )
    try:
        collection.persist(storage, STORAGE_KEY, _adapter, watchlist)
    except OSError:
        logger.exception("Error adding %s to the local watchlist", item_in.id)
        return False
    return True


def remove_from_watchlist(*, storage: Storage, movie_id: int) -> bool:
    """
    Remove a movie from the browser's watchlist.

    Returns:
        bool: False if the movie was not on the watchlist or the watchlist
        could not be written, otherwise True.
    """
    watchlist = _load(storage)
    remaining = [item for item in watchlist if item.id != movie_id]
    if len(remaining) == len(watchlist):
        return False

    try:
        collection.persist(storage, STORAGE_KEY, _adapter, remaining)
    except OSError:
        logger.exception("Error removing %s from the local watchlist", movie_id)
        return False
    return True
