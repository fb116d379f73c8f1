from fastapi import APIRouter

from cinelog.api.deps import CurrentUser, SessionDep, SessionTokenDep
from cinelog.converters import user as user_converters
from cinelog.exceptions.auth_exceptions import NotAuthenticated
from cinelog.models.auth_schemas import (
    LoginEmailRequest,
    LoginVerifyRequest,
    Message,
    Token,
)
from cinelog.schemas.user import UserPublic
from cinelog.services import auth as auth_service

router = APIRouter(tags=["login"])


@router.post("/login/email", response_model=Message)
def request_login_link(session: SessionDep, body: LoginEmailRequest) -> Message:
    """
    Email a one-time sign-in link.
    """
    return auth_service.request_login_link(session=session, email=body.email)


@router.post("/login/verify", response_model=Token)
def verify_login_link(session: SessionDep, body: LoginVerifyRequest) -> Token:
    """
    Exchange the token from a sign-in link for a session token.
    """
    return auth_service.verify_login_link(
        session=session, email=body.email, token=body.token
    )


@router.post("/logout", response_model=Message)
def logout(session: SessionDep, token: SessionTokenDep) -> Message:
    if not token:
        raise NotAuthenticated()
    return auth_service.logout(session=session, token=token)


@router.get("/me", response_model=UserPublic)
def get_current_user(current_user: CurrentUser) -> UserPublic:
    return user_converters.to_public(current_user)
