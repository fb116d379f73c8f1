from typing import Any

from sqlalchemy.dialects import postgresql, sqlite
from sqlmodel import Session


def insert_on_conflict(session: Session, model: Any) -> Any:
    """
    An INSERT for the session's dialect that supports ON CONFLICT, so an
    upsert is one atomic statement instead of a select followed by an insert.

    Parameters:
        session (Session): The database session.
        model: The table model to insert into.
    Returns:
        Insert: A PostgreSQL or SQLite insert construct.
    """
    if session.get_bind().dialect.name == "postgresql":
        return postgresql.insert(model)
    return sqlite.insert(model)
