from datetime import datetime
from uuid import UUID

from cinelog.models.user import UserBase

__all__ = [
    "UserPublic",
]


class UserPublic(UserBase):
    id: UUID
    email_verified_at: datetime | None
    created_at: datetime
