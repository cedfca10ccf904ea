# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from agora.db.session import create_tables, drop_tables, make_engine  # noqa: E402
from agora.db.session import get_db as app_get_session  # noqa: E402
from agora.main import app as fastapi_app  # noqa: E402
from agora.sync import Concepts, Synchronizations, build_concepts  # noqa: E402

TEST_DB_URL = "sqlite://"
PASSWORD = "correct horse battery staple"


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = make_engine(TEST_DB_URL)
    create_tables(engine)
    try:
        yield engine
    finally:
        drop_tables(engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def other_client(app: FastAPI) -> Iterator[TestClient]:
    """A second browser with its own session cookie."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def concepts(db_session: Session) -> Concepts:
    return build_concepts(db_session)


@pytest.fixture()
def sync(concepts: Concepts) -> Synchronizations:
    return Synchronizations(concepts)


@pytest.fixture()
def login(sync: Synchronizations) -> Callable[[str], str]:
    """Return a helper that registers ``username`` and returns a logged-in session handle."""

    def _login(username: str) -> str:
        handle = sync.sessioning.open()
        sync.create_user(handle, username, PASSWORD)
        sync.log_in(handle, username, PASSWORD)
        return handle

    return _login


@pytest.fixture()
def alice(login: Callable[[str], str]) -> str:
    return login("alice")


@pytest.fixture()
def bob(login: Callable[[str], str]) -> str:
    return login("bob")


def register_and_login(client: TestClient, username: str, password: str = PASSWORD) -> None:
    """Register ``username`` through the API and log the client in."""
    response = client.post("/api/v1/users", json={"username": username, "password": password})
    assert response.status_code == 201, response.text
    response = client.post("/api/v1/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text


@pytest.fixture()
def alice_client(client: TestClient) -> TestClient:
    register_and_login(client, "alice")
    return client


@pytest.fixture()
def bob_client(other_client: TestClient) -> TestClient:
    register_and_login(other_client, "bob")
    return other_client
