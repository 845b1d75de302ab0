from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from itertools import count

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from campusnet.core.security import create_access_token
from campusnet.crud import crud_user
from campusnet.database import Base, get_db
from campusnet.main import app
from campusnet.models.user import User
from campusnet.schemas.user import UserCreate

TEST_DB_URL = "sqlite://"

_USER_COUNTER = count(1)


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(db_session: Session) -> Iterator[TestClient]:
    def override_get_db() -> Iterator[Session]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    def _make_user(name: str | None = None, email: str | None = None, password: str = "password123") -> User:
        n = next(_USER_COUNTER)
        return crud_user.create_user(
            db_session,
            user_in=UserCreate(
                name=name or f"Student {n}",
                email=email or f"student{n}@campus.edu",
                password=password,
            ),
        )

    return _make_user


@pytest.fixture()
def auth_headers() -> Callable[[User], dict[str, str]]:
    def _auth_headers(user: User) -> dict[str, str]:
        token = create_access_token(data={"sub": str(user.id)})
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers


@pytest.fixture()
def alice(make_user) -> User:
    return make_user(name="Alice", email="alice@campus.edu")


@pytest.fixture()
def bob(make_user) -> User:
    return make_user(name="Bob", email="bob@campus.edu")


@pytest.fixture()
def carol(make_user) -> User:
    return make_user(name="Carol", email="carol@campus.edu")
