# todo_backend/app/models/user.py
from sqlalchemy import Column, Integer, String

from todo_backend.app.db.base import Base, SoftDeleteMixin, TimestampMixin


class User(Base, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, default="")

    # The UNIQUE constraint is what rejects duplicate registrations
    email = Column(String(255), unique=True, index=True, nullable=False)

    # bcrypt hash only, never the plaintext and never serialized
    hashed_password = Column(String(255), nullable=False)
