# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from todo_backend.app.core.config import Settings
from todo_backend.app.main import create_app

SECRET = "test-secret-key"


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "todo.sqlite3"


@pytest.fixture()
def make_settings(db_path: Path) -> Callable[..., Settings]:
    """
    Build Settings explicitly so tests never depend on the process
    environment or a local .env file.
    """

    def _make(**overrides) -> Settings:
        values = dict(
            DATABASE_URL=f"sqlite:///{db_path}",
            SECRET_KEY=SECRET,
            # Cheapest bcrypt cost, hashing speed is not under test
            BCRYPT_ROUNDS=4,
        )
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture()
def settings(make_settings) -> Settings:
    return make_settings()


@pytest.fixture()
def client(settings: Settings) -> Iterator[TestClient]:
    # The context manager runs the lifespan, which creates the tables
    with TestClient(create_app(settings)) as c:
        yield c


def register(client: TestClient, email: str = "a@x.com", password: str = "p1", name: str = "A"):
    return client.post(
        "/register",
        json={"name": name, "email": email, "password": password, "confirm_password": password},
    )


def login(client: TestClient, email: str = "a@x.com", password: str = "p1"):
    return client.post("/login", json={"email": email, "password": password})


@pytest.fixture()
def auth_headers(client: TestClient) -> Callable[..., dict]:
    """Register + login a user and return the Authorization header for it."""

    def _headers(email: str = "a@x.com", password: str = "p1") -> dict:
        assert register(client, email=email, password=password).status_code == 201
        token = login(client, email=email, password=password).json()["data"]["token"]
        return {"Authorization": token}

    return _headers
