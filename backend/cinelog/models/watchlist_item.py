import uuid
from datetime import datetime

from sqlalchemy import Enum as SAEnum
from sqlalchemy import UniqueConstraint
from sqlmodel import Column, Field, SQLModel

from cinelog.core.enums import MediaType
from cinelog.utils import now_utc_naive

__all__ = [
    "WatchlistItem",
]


class WatchlistItem(SQLModel, table=True):
    __table_args__ = (
        UniqueConstraint(
            "user_id", "movie_id", name="uq_watchlistitem_user_id_movie_id"
        ),
    )

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(foreign_key="user.id", ondelete="CASCADE", index=True)
    movie_id: int = Field(index=True)
    title: str = Field(max_length=500)
    poster_path: str | None = Field(default=None, max_length=500)
    release_date: str | None = Field(default=None, max_length=32)
    overview: str | None = None
    media_type: MediaType = Field(
        default=MediaType.MOVIE,
        sa_column=Column(SAEnum(MediaType, native_enum=False), nullable=False),
    )
    added_at: datetime = Field(default_factory=now_utc_naive)
