import logging

from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)


async def init_models(engine: AsyncEngine, drop_all: bool = False) -> None:
    """Create every table known to the models. Fails if the database is unreachable."""
    from todo_backend.app.db.base import Base
    # Import models so their tables are registered on Base.metadata
    from todo_backend.app import models  # noqa: F401

    try:
        async with engine.begin() as conn:
            if drop_all:
                await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
    except Exception as e:
        logger.error("Could not create tables: %s", e)
        raise
    logger.info("Database tables ready (%s)", ", ".join(sorted(Base.metadata.tables)))
