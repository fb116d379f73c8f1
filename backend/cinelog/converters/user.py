from cinelog.models.user import User
from cinelog.schemas.user import UserPublic


def to_public(user: User) -> UserPublic:
    User.model_validate(user)
    return UserPublic(**user.model_dump())
