# todo_backend/app/store/tasks.py
"""
Task persistence.

Every query hides soft-deleted rows. When `owner_id` is given, queries
only see that user's tasks; None means unscoped.
"""
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from todo_backend.app.core.errors import StoreError
from todo_backend.app.models.task import Task


class TaskStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    def _live(self, owner_id: Optional[int]):
        query = select(Task).where(Task.deleted_at.is_(None))
        if owner_id is not None:
            query = query.where(Task.user_id == owner_id)
        return query

    async def _commit(self, task: Task) -> Task:
        try:
            await self.db.commit()
            await self.db.refresh(task)
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StoreError() from e
        return task

    async def list(self, status: Optional[str] = None, owner_id: Optional[int] = None) -> List[Task]:
        query = self._live(owner_id)
        if status:
            query = query.where(Task.status == status)
        query = query.order_by(Task.id)
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            raise StoreError() from e
        return list(result.scalars().all())

    async def get(self, task_id: int, owner_id: Optional[int] = None) -> Optional[Task]:
        query = self._live(owner_id).where(Task.id == task_id)
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            raise StoreError() from e
        return result.scalars().first()

    async def create(self, user_id: int, title: str, content: str, status: str) -> Task:
        task = Task(user_id=user_id, title=title, content=content, status=status)
        self.db.add(task)
        return await self._commit(task)

    async def replace(self, task: Task, title: str, content: str, status: str) -> Task:
        """Full overwrite of the editable fields; id and owner stay as they are."""
        task.title = title
        task.content = content
        task.status = status
        self.db.add(task)
        return await self._commit(task)

    async def soft_delete(self, task: Task) -> None:
        task.deleted_at = datetime.now(timezone.utc)
        self.db.add(task)
        await self._commit(task)
