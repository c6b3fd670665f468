# todo_backend/app/security/hashing.py
"""
Password hashing with bcrypt.

The salt is random per call and embedded in the hash, so the same
password never hashes to the same string twice.
"""
import logging

import bcrypt

from todo_backend.app.core.errors import HashError

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 10


def get_password_hash(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """
    Hash a plaintext password.

    Raises HashError if bcrypt rejects the input (e.g. longer than 72 bytes
    on recent bcrypt releases) or fails internally.
    """
    try:
        hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds))
    except (ValueError, TypeError) as e:
        logger.warning("bcrypt refused to hash password: %s", e)
        raise HashError() from e
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True only if the password matches. Never raises for bad input."""
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except (ValueError, TypeError):
        return False
