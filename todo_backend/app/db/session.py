# todo_backend/app/db/session.py
"""
Async database session management for SQLAlchemy.

The engine and the session factory are built once by the application
factory and kept on `app.state`; nothing here is created at import time.

- asyncpg for PostgreSQL, pooled
- aiosqlite for SQLite, no pooling
"""
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import AsyncAdaptedQueuePool, NullPool

from todo_backend.app.core.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """
    Create and configure the async SQLAlchemy engine.

    SQLite:
    - NullPool, a new connection per session
    - check_same_thread=False for async compatibility

    PostgreSQL:
    - pool_size=5, max_overflow=10
    - pool_pre_ping=True: validate connections before checkout
    - pool_recycle=300: drop connections the server may have closed
    """
    if settings.is_sqlite:
        return create_async_engine(
            settings.DATABASE_URL,
            echo=settings.DATABASE_ECHO,
            poolclass=NullPool,
            connect_args={"check_same_thread": False},
        )

    return create_async_engine(
        settings.DATABASE_URL,
        echo=settings.DATABASE_ECHO,
        poolclass=AsyncAdaptedQueuePool,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
        pool_recycle=300,
    )


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False: attributes stay readable after commit
    # autoflush=False: writes only happen on explicit flush/commit
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Usage in FastAPI endpoints:
        @router.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db)):
            ...

    One session per request, closed when the request finishes (also on
    errors). This does NOT auto-commit; the stores commit explicitly.
    """
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.sessionmaker
    async with session_factory() as session:
        yield session
