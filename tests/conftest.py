# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.errors import UpstreamError
from app.core.security import create_access_token, hash_password
from app.main import create_app
from app.models.user import User
from app.routers.deps import get_text_generator

DEFAULT_PASSWORD = "correct-horse-battery"


class FakeTextGenerator:
    """
    Deterministic stand-in for Gemini.

    - Captures (api_key, prompt) for assertions
    - Returns a fixed text, or raises UpstreamError when `fail` is set
    """

    def __init__(self, next_text: str = "ok", fail: bool = False) -> None:
        self.next_text = next_text
        self.fail = fail
        self.calls: list[tuple[str, str]] = []

    async def generate(self, api_key: str, prompt: str) -> str:
        self.calls.append((api_key, prompt))
        if self.fail:
            raise UpstreamError("boom")
        return self.next_text


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "tracker.sqlite3"


@pytest.fixture()
def settings(db_path: Path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{db_path}",
        secret_key="test-secret-key",
        default_password=DEFAULT_PASSWORD,
        gemini_api_key=None,
        _env_file=None,
    )


@pytest.fixture()
def fake_ai() -> FakeTextGenerator:
    return FakeTextGenerator(next_text="Keep going!")


@pytest.fixture()
def app(settings: Settings, fake_ai: FakeTextGenerator) -> FastAPI:
    application = create_app(settings)
    application.dependency_overrides[get_text_generator] = lambda: fake_ai
    return application


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    # Context manager runs lifespan: tables + default user
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def auth_headers(client: TestClient) -> dict[str, str]:
    resp = client.post("/api/auth/login", json={"password": DEFAULT_PASSWORD})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture()
def db_session(client: TestClient, db_path: Path) -> Iterator[Session]:
    """Sync session on the same SQLite file, for arranging rows directly."""
    engine = create_engine(f"sqlite:///{db_path}")
    with Session(engine) as session:
        yield session
    engine.dispose()


@pytest.fixture()
def other_user_headers(db_session: Session, settings: Settings) -> dict[str, str]:
    user = User(username="someone_else", password_hash=hash_password("irrelevant"))
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return {"Authorization": f"Bearer {create_access_token(settings, user.id)}"}
