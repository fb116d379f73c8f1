from datetime import datetime
from uuid import UUID

from sqlmodel import Field, SQLModel

__all__ = [
    "AuthSession",
    "VerificationToken",
]


class AuthSession(SQLModel, table=True):
    token_hash: str = Field(primary_key=True, max_length=64)
    user_id: UUID = Field(foreign_key="user.id", ondelete="CASCADE", index=True)
    expires: datetime


class VerificationToken(SQLModel, table=True):
    token_hash: str = Field(primary_key=True, max_length=64)
    identifier: str = Field(index=True, max_length=255)
    expires: datetime
