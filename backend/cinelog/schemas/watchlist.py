from datetime import datetime

from sqlmodel import Field, SQLModel

from cinelog.core.enums import MediaType

__all__ = [
    "WatchlistItemCreate",
    "WatchlistItemPublic",
    "WatchlistCheck",
    "SuccessResponse",
]


class WatchlistItemCreate(SQLModel):
    id: int = Field(description="Metadata API id of the movie or show")
    title: str = Field(max_length=500)
    poster_path: str | None = Field(default=None, max_length=500)
    release_date: str | None = Field(default=None, max_length=32)
    overview: str | None = None
    media_type: MediaType = MediaType.MOVIE


class WatchlistItemPublic(WatchlistItemCreate):
    added_at: datetime


class WatchlistCheck(SQLModel):
    is_in_watchlist: bool


class SuccessResponse(SQLModel):
    success: bool
