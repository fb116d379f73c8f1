from collections.abc import Generator
from pathlib import Path
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from cinelog.core.config import settings
from cinelog.core.db import engine
from cinelog.exceptions.auth_exceptions import NotAuthenticated
from cinelog.exceptions.request_exceptions import InvalidAnonymousId, MissingIdentifier
from cinelog.local.storage import FileStorage, MemoryStorage, Storage
from cinelog.models.user import User
from cinelog.services import auth as auth_service

bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


SessionDep = Annotated[Session, Depends(get_db)]


def get_session_token(
    request: Request,
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
) -> str | None:
    if credentials is not None:
        return credentials.credentials
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


SessionTokenDep = Annotated[str | None, Depends(get_session_token)]


def get_current_user_optional(
    session: SessionDep, token: SessionTokenDep
) -> User | None:
    return auth_service.resolve_user(session=session, token=token)


OptionalUser = Annotated[User | None, Depends(get_current_user_optional)]


def get_current_user(user: OptionalUser) -> User:
    if user is None:
        raise NotAuthenticated()
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


def get_local_storage_root() -> Path:
    return settings.LOCAL_STORAGE_DIR


LocalStorageRootDep = Annotated[Path, Depends(get_local_storage_root)]
AnonymousIdHeader = Annotated[str | None, Header(alias=settings.ANONYMOUS_ID_HEADER)]


def _parse_anonymous_id(value: str) -> UUID:
    try:
        return UUID(value)
    except ValueError as e:
        raise InvalidAnonymousId(value) from e


def local_storage_for(root: Path, anonymous_id: str | None) -> Storage:
    """
    The browser storage named by an anonymous id, or an empty one when the
    request does not identify a browser.
    Raises:
        InvalidAnonymousId: If the id is not a UUID.
    """
    if not anonymous_id:
        return MemoryStorage()
    return FileStorage(root / str(_parse_anonymous_id(anonymous_id)))


def get_local_storage(
    root: LocalStorageRootDep, anonymous_id: AnonymousIdHeader = None
) -> Storage:
    if not anonymous_id:
        raise MissingIdentifier(settings.ANONYMOUS_ID_HEADER)
    return local_storage_for(root, anonymous_id)


LocalStorageDep = Annotated[Storage, Depends(get_local_storage)]
