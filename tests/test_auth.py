# tests/test_auth.py

from __future__ import annotations

import sqlite3

from conftest import login, register
from todo_backend.app.security import hashing


def test_register_then_login_returns_token(client) -> None:
    r = register(client)
    assert r.status_code == 201
    body = r.json()
    assert body["status"] == 201
    assert body["message"] == "User registered successfully"
    assert body["data"]["email"] == "a@x.com"
    assert body["data"]["name"] == "A"
    assert isinstance(body["data"]["id"], int)

    r = login(client)
    assert r.status_code == 200
    assert r.json()["message"] == "Logged in successfully"
    assert r.json()["data"]["token"]


def test_register_never_echoes_password_or_hash(client) -> None:
    data = register(client, password="s3cret").json()["data"]
    assert "password" not in data
    assert "hashed_password" not in data
    assert "s3cret" not in str(data)


def test_password_is_stored_hashed(client, db_path) -> None:
    register(client, password="s3cret")
    with sqlite3.connect(db_path) as conn:
        (stored,) = conn.execute("SELECT hashed_password FROM users").fetchone()
    assert stored != "s3cret"
    assert stored.startswith("$2")


def test_register_password_mismatch(client) -> None:
    r = client.post(
        "/register",
        json={"name": "A", "email": "a@x.com", "password": "p1", "confirm_password": "p2"},
    )
    assert r.status_code == 400
    assert r.json() == {"status": 400, "message": "Passwords do not match", "data": None}


def test_register_duplicate_email_conflicts_regardless_of_password(client) -> None:
    assert register(client, password="p1").status_code == 201

    r = register(client, password="completely-different")
    assert r.status_code == 409
    assert r.json()["message"] == "Email already exists"

    # The original account is untouched
    assert login(client, password="p1").status_code == 200


def test_register_duplicate_email_is_checked_before_hashing(client, monkeypatch) -> None:
    assert register(client).status_code == 201

    calls = []
    real_hash = hashing.get_password_hash

    def counting_hash(*args, **kwargs):
        calls.append(args)
        return real_hash(*args, **kwargs)

    monkeypatch.setattr(hashing, "get_password_hash", counting_hash)

    # Longer than bcrypt accepts; a taken email still wins
    r = register(client, password="x" * 80)
    assert r.status_code == 409
    assert r.json() == {"status": 409, "message": "Email already exists", "data": None}
    assert calls == []


def test_register_malformed_body(client) -> None:
    r = client.post("/register", json={"name": "A", "email": "a@x.com"})
    assert r.status_code == 400
    assert r.json() == {"status": 400, "message": "Invalid request payload", "data": None}

    r = client.post("/register", content=b"not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid request payload"


def test_login_unknown_email(client) -> None:
    r = login(client, email="nobody@x.com")
    assert r.status_code == 404
    assert r.json() == {"status": 404, "message": "User not found", "data": None}


def test_login_wrong_password(client, db_path) -> None:
    register(client)
    with sqlite3.connect(db_path) as conn:
        before = conn.execute("SELECT * FROM users").fetchall()

    r = login(client, password="wrong")
    assert r.status_code == 401
    assert r.json()["message"] == "Invalid credentials"

    with sqlite3.connect(db_path) as conn:
        after = conn.execute("SELECT * FROM users").fetchall()
    assert before == after


def test_login_malformed_body(client) -> None:
    r = client.post("/login", json={"email": "a@x.com"})
    assert r.status_code == 400
    assert r.json()["message"] == "Invalid request payload"


def test_login_token_is_accepted_by_protected_routes(client) -> None:
    register(client)
    token = login(client).json()["data"]["token"]

    r = client.get("/tasks/", headers={"Authorization": token})
    assert r.status_code == 200
    assert r.json() == {"status": 200, "message": "Tasks retrieved successfully", "data": []}


def test_root_is_public(client) -> None:
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["status"] == 200


def test_unknown_route_uses_envelope(client) -> None:
    r = client.get("/does-not-exist")
    assert r.status_code == 404
    assert r.json() == {"status": 404, "message": "Not Found", "data": None}
