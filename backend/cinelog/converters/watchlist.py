from cinelog.models.watchlist_item import WatchlistItem
from cinelog.schemas.watchlist import WatchlistItemPublic


def to_public(item: WatchlistItem) -> WatchlistItemPublic:
    WatchlistItem.model_validate(item)
    return WatchlistItemPublic(
        id=item.movie_id,
        title=item.title,
        poster_path=item.poster_path,
        release_date=item.release_date,
        overview=item.overview,
        media_type=item.media_type,
        added_at=item.added_at,
    )
