from datetime import datetime
from uuid import UUID

from sqlmodel import Field, SQLModel

from cinelog.models.review import ReviewBase

__all__ = [
    "RatingCriteriaInput",
    "RatingCriteria",
    "ReviewInput",
    "ReviewPublic",
]


class RatingCriteriaInput(SQLModel):
    story: int = Field(ge=1, le=10)
    acting: int = Field(ge=1, le=10)
    direction: int = Field(ge=1, le=10)
    cinematography: int = Field(ge=1, le=10)
    music: int = Field(ge=1, le=10)
    # Accepted for compatibility with older clients, never stored
    overall: int | None = None


class RatingCriteria(SQLModel):
    story: int
    acting: int
    direction: int
    cinematography: int
    music: int
    overall: int


class ReviewInput(ReviewBase):
    ratings: RatingCriteriaInput


class ReviewPublic(ReviewBase):
    id: UUID
    ratings: RatingCriteria
    overall_star_rating: float
    created_at: datetime
    updated_at: datetime
