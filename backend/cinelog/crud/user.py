from uuid import UUID

from sqlmodel import Session, select

from cinelog.models.user import User


def get_user_by_id(*, session: Session, user_id: UUID) -> User | None:
    """
    Get a user by their ID.

    Parameters:
        session (Session): The database session.
        user_id (UUID): The ID of the user to retrieve.
    Returns:
        User | None: The user object if found, otherwise None.
    """
    return session.get(User, user_id)


def get_user_by_email(*, session: Session, email: str) -> User | None:
    """
    Get a user by their email address.

    Parameters:
        session (Session): The database session.
        email (str): The email address of the user to retrieve.
    Returns:
        User | None: The user object if found, otherwise None.
    """
    statement = select(User).where(User.email == email.lower())
    return session.exec(statement).one_or_none()


def create_user(*, session: Session, email: str) -> User:
    """
    Create a new user in the database.

    Parameters:
        session (Session): The database session.
        email (str): The email address of the new user.
    Returns:
        User: The created user object.
    Raises:
        IntegrityError: If a user with the same email already exists.
    """
    user = User(email=email.lower())
    session.add(user)
    session.flush()
    return user
