# todo_backend/app/core/config.py
"""
Application configuration using pydantic-settings.

Security considerations:
- DATABASE_URL and SECRET_KEY have no defaults; a missing value fails at
  startup, before any request is accepted
- CORS_ORIGINS parsed from comma-separated env var, never defaults to "*"
- Database URLs normalized for async drivers automatically
"""
from functools import lru_cache
from typing import List

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Strictly typed application settings.

    Priority for loading:
    1. Values passed to the constructor (tests)
    2. Environment variables
    3. .env file (via pydantic-settings)
    4. Default values (only for non-secret settings)
    """

    # ─────────────────────────────────────────────────────────────
    # Application metadata
    # ─────────────────────────────────────────────────────────────
    PROJECT_NAME: str = "Todo API"
    PROJECT_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # Address the `todo-backend` command binds to
    HOST: str = "0.0.0.0"
    PORT: int = Field(default=8080, ge=1, le=65535)

    # ─────────────────────────────────────────────────────────────
    # Security: JWT Configuration
    # SECRET_TOKEN is accepted for compatibility with older deployments
    # ─────────────────────────────────────────────────────────────
    SECRET_KEY: str = Field(validation_alias=AliasChoices("SECRET_KEY", "SECRET_TOKEN"))
    ALGORITHM: str = "HS256"
    TOKEN_ISSUER: str = "todo-app"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # bcrypt cost factor
    BCRYPT_ROUNDS: int = Field(default=10, ge=4, le=31)

    # When False, any authenticated user can read and modify any task
    TASK_OWNERSHIP_ENFORCED: bool = True

    # ─────────────────────────────────────────────────────────────
    # Database Configuration
    # DB_URL is accepted for compatibility with older deployments.
    # postgres:// URLs are normalized to postgresql+asyncpg://.
    # ─────────────────────────────────────────────────────────────
    DATABASE_URL: str = Field(validation_alias=AliasChoices("DATABASE_URL", "DB_URL"))
    DATABASE_ECHO: bool = False

    @field_validator("SECRET_KEY", "DATABASE_URL")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("DATABASE_URL", mode="after")
    @classmethod
    def normalize_database_url(cls, v: str) -> str:
        """
        Normalize database URLs for async SQLAlchemy compatibility.

        Conversions:
        - postgres://     → postgresql+asyncpg://
        - postgresql://   → postgresql+asyncpg://
        - sqlite:///      → sqlite+aiosqlite:///
        """
        url = v.strip()

        if url.startswith("postgres://"):
            return url.replace("postgres://", "postgresql+asyncpg://", 1)

        if url.startswith("postgresql://") and "+asyncpg" not in url:
            return url.replace("postgresql://", "postgresql+asyncpg://", 1)

        if url.startswith("sqlite:///") and "+aiosqlite" not in url:
            return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)

        return url

    # ─────────────────────────────────────────────────────────────
    # CORS Configuration
    # Empty string → empty list (NOT "*" for security)
    # ─────────────────────────────────────────────────────────────
    CORS_ORIGINS: str = ""

    @property
    def BACKEND_CORS_ORIGINS(self) -> List[str]:
        """Parse CORS_ORIGINS string into a list of allowed origins."""
        if not self.CORS_ORIGINS or not self.CORS_ORIGINS.strip():
            return []

        return [
            origin.strip()
            for origin in self.CORS_ORIGINS.split(",")
            if origin.strip()
        ]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        # Extra fields in .env are ignored (prevents config injection)
        extra="ignore",
    )

    @property
    def is_sqlite(self) -> bool:
        """Check if using SQLite database (local development)."""
        return "sqlite" in self.DATABASE_URL.lower()


@lru_cache()
def get_settings() -> Settings:
    """
    Cached settings instance.

    Raises pydantic.ValidationError when DATABASE_URL or SECRET_KEY is
    missing, which aborts application startup.
    """
    return Settings()
