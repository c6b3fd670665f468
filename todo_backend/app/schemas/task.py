# todo_backend/app/schemas/task.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class TaskIn(BaseModel):
    """
    Body for both create and update.

    Update is a full replacement, so omitted fields fall back to "".
    `id` and `user_id` in the body are ignored: the id comes from the path
    and the owner from the token.
    """
    title: str = ""
    content: str = ""
    status: str = ""


class TaskResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    status: str
    user_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None
