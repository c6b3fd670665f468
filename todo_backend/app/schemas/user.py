# todo_backend/app/schemas/user.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


# Registration payload; confirm_password must equal password
class UserCreate(BaseModel):
    name: str
    email: str
    password: str
    confirm_password: str


class UserLogin(BaseModel):
    email: str
    password: str


# Returned to clients: the password hash is never part of it
class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None


class Token(BaseModel):
    token: str
