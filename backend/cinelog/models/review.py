import uuid
from datetime import datetime

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from cinelog.utils import now_utc_naive

__all__ = [
    "ReviewBase",
    "Review",
]


# Shared properties
class ReviewBase(SQLModel):
    movie_id: int = Field(index=True)
    movie_title: str = Field(max_length=500)
    movie_poster_path: str | None = Field(default=None, max_length=500)
    movie_release_date: str | None = Field(default=None, max_length=32)
    comment: str | None = None


# Database model, database table inferred from class name
class Review(ReviewBase, table=True):
    __table_args__ = (
        UniqueConstraint("user_id", "movie_id", name="uq_review_user_id_movie_id"),
    )

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(foreign_key="user.id", ondelete="CASCADE", index=True)

    story: int
    acting: int
    direction: int
    cinematography: int
    music: int
    # Derived from the five sub-ratings on every write
    overall: int
    overall_star_rating: float

    created_at: datetime = Field(default_factory=now_utc_naive)
    updated_at: datetime = Field(default_factory=now_utc_naive)
