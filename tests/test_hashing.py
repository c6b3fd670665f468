# tests/test_hashing.py

from __future__ import annotations

from todo_backend.app.security import hashing


def test_hash_and_verify() -> None:
    hashed = hashing.get_password_hash("p1", rounds=4)
    assert hashed != "p1"
    assert hashing.verify_password("p1", hashed)
    assert not hashing.verify_password("p2", hashed)


def test_salt_is_random_per_call() -> None:
    assert hashing.get_password_hash("same", rounds=4) != hashing.get_password_hash("same", rounds=4)


def test_work_factor_is_embedded() -> None:
    assert hashing.get_password_hash("p1", rounds=5).startswith("$2b$05$")


def test_malformed_hash_never_raises() -> None:
    assert hashing.verify_password("p1", "not-a-bcrypt-hash") is False
    assert hashing.verify_password("p1", "") is False
