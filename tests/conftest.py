# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from datetime import timedelta
from itertools import count
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("AUTH_SECRET", "test-auth-secret")
os.environ.setdefault("CDN_TOKEN", "test-cdn-token")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BASE_URL", "http://test")

from authly.api.dependencies import get_cdn_client_dep  # noqa: E402
from authly.db.session import Base  # noqa: E402
from authly.db.session import get_db as app_get_session  # noqa: E402
from authly.db.time import utcnow  # noqa: E402
from authly.main import app as fastapi_app  # noqa: E402
from authly.models import Chart, User  # noqa: E402
from authly.services.staging import UploadStaging  # noqa: E402
from authly.services.tokens import get_token_service  # noqa: E402

TEST_DB_URL = "sqlite://"

AMY_RHYTHM = [{"key": "A", "time": 0}, {"key": "B", "time": 500}]

_CHART_CLOCK = count(1)


@pytest.fixture(scope="session")
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
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


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


@pytest.fixture(autouse=True)
def upload_staging(app: FastAPI) -> Iterator[UploadStaging]:
    """Give every test its own empty staging area."""
    previous = app.state.upload_staging
    staging = UploadStaging()
    app.state.upload_staging = staging
    try:
        yield staging
    finally:
        app.state.upload_staging = previous


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def override_cdn(app: FastAPI) -> Iterator[Callable[[Any], Any]]:
    """Install a CDN client for the duration of a test."""

    def _install(cdn_client: Any) -> Any:
        app.dependency_overrides[get_cdn_client_dep] = lambda: cdn_client
        return cdn_client

    try:
        yield _install
    finally:
        app.dependency_overrides.pop(get_cdn_client_dep, None)


def make_user(db: Session, username: str, key_presses: list[dict[str, Any]] | None = None) -> User:
    user = User(
        username=username,
        audio_url=f"a://{username}",
        key_presses=list(key_presses if key_presses is not None else AMY_RHYTHM),
    )
    db.add(user)
    db.commit()
    return user


def make_chart(db: Session, owner: str, title: str | None = None) -> Chart:
    """Persist a chart whose created_at is strictly later than any previous one."""
    created = utcnow() + timedelta(seconds=next(_CHART_CLOCK))
    chart = Chart(
        user_username=owner,
        title=title or f"Chart by {owner}",
        audio_url="a://chart",
        key_presses=[{"key": "K", "time": 0}, {"key": "L", "time": 250}],
        created_at=created,
        updated_at=created,
    )
    db.add(chart)
    db.commit()
    return chart


@pytest.fixture()
def amy(db_session: Session) -> User:
    """Registered user 'amy' with a two-press rhythm."""
    return make_user(db_session, "amy")


@pytest.fixture()
def bob(db_session: Session) -> User:
    return make_user(db_session, "bob", [{"key": "X", "time": 100}])


@pytest.fixture()
def auth_token(amy: User) -> dict[str, str]:
    """Return authorization headers for amy."""
    token = get_token_service().issue(amy.username)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def other_auth_token(bob: User) -> dict[str, str]:
    """Return authorization headers for bob."""
    token = get_token_service().issue(bob.username)
    return {"Authorization": f"Bearer {token}"}
