import uuid
from datetime import datetime

from pydantic import EmailStr
from sqlmodel import Field, SQLModel

from cinelog.utils import now_utc_naive

__all__ = [
    "UserBase",
    "User",
]


# Shared properties
class UserBase(SQLModel):
    email: EmailStr = Field(unique=True, index=True, max_length=255)


# Database model, database table inferred from class name
class User(UserBase, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    email_verified_at: datetime | None = Field(default=None)
    created_at: datetime = Field(default_factory=now_utc_naive)
