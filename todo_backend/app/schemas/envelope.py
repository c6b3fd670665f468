# todo_backend/app/schemas/envelope.py
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


# Every response body, success or failure, uses this wrapper
class Envelope(BaseModel, Generic[T]):
    status: int
    message: str
    data: Optional[T] = None


def envelope(status: int, message: str, data: Any = None) -> Envelope[Any]:
    return Envelope[Any](status=status, message=message, data=data)
