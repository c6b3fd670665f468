from todo_backend.app.models.task import Task
from todo_backend.app.models.user import User

__all__ = ["Task", "User"]
