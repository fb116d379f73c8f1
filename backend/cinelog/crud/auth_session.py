from datetime import datetime
from uuid import UUID

from sqlmodel import Session, col, select

from cinelog.core.security import hash_token
from cinelog.models.auth_session import AuthSession, VerificationToken
from cinelog.models.user import User


def create_verification_token(
    *,
    session: Session,
    identifier: str,
    token: str,
    expires: datetime,
) -> VerificationToken:
    verification = VerificationToken(
        token_hash=hash_token(token),
        identifier=identifier.lower(),
        expires=expires,
    )
    session.add(verification)
    session.flush()
    return verification


def use_verification_token(
    *,
    session: Session,
    identifier: str,
    token: str,
    now: datetime,
) -> bool:
    """
    Consume a one-time sign-in token.

    The token is deleted whether or not it has expired, so a link can never be
    used twice.

    Returns:
        bool: True if the token existed for this identifier and was still valid.
    """
    verification = session.exec(
        select(VerificationToken).where(
            VerificationToken.token_hash == hash_token(token),
            VerificationToken.identifier == identifier.lower(),
        )
    ).one_or_none()
    if verification is None:
        return False

    session.delete(verification)
    session.flush()
    return verification.expires > now


def create_auth_session(
    *,
    session: Session,
    user_id: UUID,
    token: str,
    expires: datetime,
) -> AuthSession:
    auth_session = AuthSession(
        token_hash=hash_token(token),
        user_id=user_id,
        expires=expires,
    )
    session.add(auth_session)
    session.flush()
    return auth_session


def get_user_by_session_token(
    *,
    session: Session,
    token: str,
    now: datetime,
) -> User | None:
    """
    Resolve a session token to its user.

    Returns:
        User | None: The owner of the session, or None if the token is unknown
        or the session has expired.
    """
    stmt = (
        select(User)
        .join(AuthSession, col(AuthSession.user_id) == col(User.id))
        .where(
            AuthSession.token_hash == hash_token(token),
            AuthSession.expires > now,
        )
    )
    return session.exec(stmt).one_or_none()


def delete_auth_session(*, session: Session, token: str) -> bool:
    auth_session = session.get(AuthSession, hash_token(token))
    if auth_session is None:
        return False
    session.delete(auth_session)
    session.flush()
    return True


def delete_expired(*, session: Session, now: datetime) -> int:
    """
    Delete expired sessions and verification tokens.

    Returns:
        int: The number of rows removed.
    """
    expired_sessions = session.exec(
        select(AuthSession).where(AuthSession.expires <= now)
    ).all()
    expired_tokens = session.exec(
        select(VerificationToken).where(VerificationToken.expires <= now)
    ).all()
    for row in [*expired_sessions, *expired_tokens]:
        session.delete(row)
    session.flush()
    return len(expired_sessions) + len(expired_tokens)
