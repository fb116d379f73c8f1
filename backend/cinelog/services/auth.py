from datetime import timedelta
from logging import getLogger
from urllib.parse import urlencode

from sqlmodel import Session

from cinelog.core.config import settings
from cinelog.core.security import generate_token
from cinelog.crud import auth_session as auth_crud
from cinelog.crud import user as users_crud
from cinelog.exceptions.auth_exceptions import (
    InvalidVerificationToken,
    LoginEmailNotSent,
)
from cinelog.exceptions.base import AppError
from cinelog.models.auth_schemas import Message, Token
from cinelog.models.user import User
from cinelog.utils import (
    EmailDeliveryError,
    generate_login_email,
    now_utc_naive,
    send_email,
)

logger = getLogger(__name__)


def build_login_link(*, email: str, token: str) -> str:
    query = urlencode({"token": token, "email": email})
    return f"{settings.FRONTEND_HOST.rstrip('/')}/auth/verify?{query}"


def request_login_link(*, session: Session, email: str) -> Message:
    """
    Store a one-time sign-in token for an email address and deliver the link.

    Without SMTP configured the link is written to the log instead.
    Raises:
        LoginEmailNotSent: If the SMTP server rejected the message.
        AppError: If the token could not be stored.
    """
    token = generate_token()
    expires = now_utc_naive() + timedelta(hours=settings.EMAIL_TOKEN_EXPIRE_HOURS)
    try:
        auth_crud.create_verification_token(
            session=session, identifier=email, token=token, expires=expires
        )
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e

    link = build_login_link(email=email, token=token)
    if not settings.emails_enabled:
        logger.info("Sign-in link for %s: %s", email, link)
        return Message(message="Sign-in link created.")

    email_data = generate_login_email(email_to=email, link=link)
    try:
        send_email(
            email_to=email,
            subject=email_data.subject,
            html_content=email_data.html_content,
        )
    except EmailDeliveryError as e:
        logger.exception("Sign-in email delivery failed for %s", email)
        raise LoginEmailNotSent(email) from e
    return Message(message="Sign-in link sent.")


def verify_login_link(*, session: Session, email: str, token: str) -> Token:
    """
    Exchange a sign-in token for a session token, creating the account on
    first sign-in.
    Raises:
        InvalidVerificationToken: If the token is unknown, already used or expired.
        AppError: If the session could not be stored.
    """
    now = now_utc_naive()
    try:
        valid = auth_crud.use_verification_token(
            session=session, identifier=email, token=token, now=now
        )
        if not valid:
            session.commit()
        else:
            user = users_crud.get_user_by_email(session=session, email=email)
            if user is None:
                user = users_crud.create_user(session=session, email=email)
                logger.info("Created account %s on first sign-in", user.id)
            if user.email_verified_at is None:
                user.email_verified_at = now
            session_token = generate_token()
            auth_crud.create_auth_session(
                session=session,
                user_id=user.id,
                token=session_token,
                expires=now + timedelta(days=settings.SESSION_EXPIRE_DAYS),
            )
            session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e
    if not valid:
        raise InvalidVerificationToken()
    return Token(access_token=session_token)


def resolve_user(*, session: Session, token: str | None) -> User | None:
    """
    Resolve the caller's account from a session token, or None.
    """
    if not token:
        return None
    return auth_crud.get_user_by_session_token(
        session=session, token=token, now=now_utc_naive()
    )


def logout(*, session: Session, token: str) -> Message:
    try:
        auth_crud.delete_auth_session(session=session, token=token)
        session.commit()
    except Exception as e:
        session.rollback()
        raise AppError from e
    return Message(message="Signed out.")


def purge_expired(*, session: Session) -> int:
    removed = auth_crud.delete_expired(session=session, now=now_utc_naive())
    session.commit()
    logger.info("Purged %d expired sessions and sign-in tokens", removed)
    return removed
