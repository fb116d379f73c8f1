from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

from cinelog import models  # noqa: F401  registers every table on the metadata
from cinelog.core.config import settings


def make_engine(url: str) -> Engine:
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args, pool_pre_ping=True)


engine = make_engine(settings.SQLALCHEMY_DATABASE_URI)


def init_db(bind: Engine = engine) -> None:
    """
    Create missing tables directly from the models.

    Only used for local SQLite setups; staging and production are migrated
    with Alembic.
    """
    SQLModel.metadata.create_all(bind)
