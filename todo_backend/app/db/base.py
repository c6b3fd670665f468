# todo_backend/app/db/base.py
"""
SQLAlchemy declarative base and the column mixins shared by all models.
"""
from sqlalchemy import Column, DateTime
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.sql import func


# ─────────────────────────────────────────────────────────────────────────────
# Declarative Base for ORM Models
# All models inherit from this class
# ─────────────────────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Usage:
        class User(Base, TimestampMixin, SoftDeleteMixin):
            __tablename__ = "users"
            id = Column(Integer, primary_key=True)
            ...
    """
    pass


class TimestampMixin:
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class SoftDeleteMixin:
    """
    Tombstone column. Rows with a deleted_at are hidden from the default
    store queries but never purged.
    """
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)


__all__ = [
    "Base",
    "TimestampMixin",
    "SoftDeleteMixin",
]
