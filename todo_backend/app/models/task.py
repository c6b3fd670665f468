# todo_backend/app/models/task.py
from sqlalchemy import Column, ForeignKey, Integer, String, Text

from todo_backend.app.db.base import Base, SoftDeleteMixin, TimestampMixin


class Task(Base, TimestampMixin, SoftDeleteMixin):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)

    # Set once at creation from the authenticated caller
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    title = Column(String(255), nullable=False, default="")
    content = Column(Text, nullable=False, default="")

    # Free-form, no enum ("todo", "done", ...)
    status = Column(String(50), nullable=False, default="", index=True)
