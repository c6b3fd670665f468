# todo_backend/app/store/users.py
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from todo_backend.app.core.errors import ConflictError, StoreError
from todo_backend.app.models.user import User


class UserStore:
    """User persistence. Lookups return None for a missing row; driver failures raise StoreError."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, name: str, email: str, hashed_password: str) -> User:
        user = User(name=name, email=email, hashed_password=hashed_password)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise ConflictError("Email already exists") from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StoreError() from e
        await self.db.refresh(user)
        return user

    async def get_by_email(self, email: str) -> Optional[User]:
        query = select(User).where(User.email == email, User.deleted_at.is_(None))
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            raise StoreError() from e
        return result.scalars().first()
