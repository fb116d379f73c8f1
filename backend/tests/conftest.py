from collections.abc import Generator
from datetime import timedelta
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from cinelog import models  # noqa: F401
from cinelog.api.deps import get_db, get_local_storage_root
from cinelog.core.security import generate_token
from cinelog.crud import auth_session as auth_crud
from cinelog.local.storage import MemoryStorage
from cinelog.main import app
from cinelog.models.user import User
from cinelog.utils import now_utc_naive

from .fixtures.factories import *

ANONYMOUS_ID = "6f1d2c3b-4a5e-4f60-8a7b-9c0d1e2f3a4b"


@pytest.fixture(scope="function")
def test_engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function", autouse=True)
def db_transaction(test_engine: Engine) -> Generator[Session, None, None]:
    session = Session(test_engine)

    def override_get_db() -> Generator[Session, None, None]:
        yield session

    app.dependency_overrides[get_db] = override_get_db

    yield session

    session.close()
    app.dependency_overrides.clear()


@pytest.fixture(scope="function", autouse=True)
def local_storage_root(tmp_path: Path, db_transaction: Session) -> Path:
    root = tmp_path / "local_storage"
    app.dependency_overrides[get_local_storage_root] = lambda: root
    return root


@pytest.fixture(scope="function")
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture(scope="function")
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture(scope="function")
def anonymous_headers() -> dict[str, str]:
    return {"X-Anonymous-Id": ANONYMOUS_ID}


def token_headers_for(session: Session, user: User) -> dict[str, str]:
    token = generate_token()
    auth_crud.create_auth_session(
        session=session,
        user_id=user.id,
        token=token,
        expires=now_utc_naive() + timedelta(days=1),
    )
    session.commit()
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(scope="function")
def normal_user(user_factory) -> User:
    return user_factory()


@pytest.fixture(scope="function")
def normal_user_token_headers(
    db_transaction: Session, normal_user: User
) -> dict[str, str]:
    return token_headers_for(db_transaction, normal_user)


@pytest.fixture(scope="function")
def other_user_token_headers(
    db_transaction: Session, user_factory
) -> dict[str, str]:
    return token_headers_for(db_transaction, user_factory())
