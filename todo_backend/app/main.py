import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from todo_backend.app.api.router import api_router
from todo_backend.app.core.config import Settings, get_settings
from todo_backend.app.core.errors import install_exception_handlers
from todo_backend.app.core.logging import setup_logging
from todo_backend.app.db import init_models
from todo_backend.app.db.session import create_engine, create_sessionmaker
from todo_backend.app.schemas.envelope import envelope
from todo_backend.app.security.jwt import TokenService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Tables are created before the first request; an unreachable database aborts startup
    await init_models(app.state.engine)
    logger.info("%s %s started", app.title, app.version)
    yield
    await app.state.engine.dispose()
    logger.info("%s stopped", app.title)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    Settings, engine, session factory and token service are created here
    once and stored on `app.state`; request dependencies read them from
    there. Missing DATABASE_URL / SECRET_KEY raises before the app exists.
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
        lifespan=lifespan,
    )

    engine = create_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.sessionmaker = create_sessionmaker(engine)
    app.state.token_service = TokenService.from_settings(settings)

    if settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.BACKEND_CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    install_exception_handlers(app)
    app.include_router(api_router)

    @app.get("/")
    def root():
        return envelope(200, f"Welcome to {settings.PROJECT_NAME}")

    return app
