# todo_backend/app/api/deps.py
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader
from sqlalchemy.ext.asyncio import AsyncSession

from todo_backend.app.core.config import Settings
from todo_backend.app.core.errors import AuthError, TokenError
from todo_backend.app.db.session import get_db
from todo_backend.app.security.jwt import TokenService
from todo_backend.app.store.tasks import TaskStore
from todo_backend.app.store.users import UserStore

logger = logging.getLogger(__name__)

# The raw header value is the token; there is no "Bearer " prefix
token_header = APIKeyHeader(name="Authorization", auto_error=False)


@dataclass(frozen=True)
class Principal:
    """The authenticated caller, handed to protected endpoints by parameter."""
    user_id: int


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_user_store(db: AsyncSession = Depends(get_db)) -> UserStore:
    return UserStore(db)


def get_task_store(db: AsyncSession = Depends(get_db)) -> TaskStore:
    return TaskStore(db)


async def get_current_principal(
        token: Optional[str] = Depends(token_header),
        tokens: TokenService = Depends(get_token_service),
) -> Principal:
    if not token:
        raise AuthError("Authorization token is required")

    try:
        user_id = tokens.verify(token)
    except TokenError as e:
        logger.debug("Rejected token: %s", e.reason)
        raise

    return Principal(user_id=user_id)
