# todo_backend/app/api/endpoints/tasks.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, status

from todo_backend.app.api import deps
from todo_backend.app.core.config import Settings
from todo_backend.app.core.errors import AuthError, NotFoundError, ValidationError
from todo_backend.app.models.task import Task
from todo_backend.app.schemas.envelope import Envelope
from todo_backend.app.schemas.task import TaskIn, TaskResponse
from todo_backend.app.store.tasks import TaskStore

router = APIRouter()

# Largest value an INTEGER primary key column holds
MAX_TASK_ID = 2**31 - 1


def _scope(principal: deps.Principal, settings: Settings) -> Optional[int]:
    # None = every user's tasks are visible (compatibility mode)
    return principal.user_id if settings.TASK_OWNERSHIP_ENFORCED else None


def _parse_id(raw: str) -> Optional[int]:
    if not (raw.isascii() and raw.isdigit()):
        return None
    task_id = int(raw)
    return task_id if 1 <= task_id <= MAX_TASK_ID else None


async def _get_or_404(store: TaskStore, raw_id: str, owner_id: Optional[int]) -> Task:
    # An id that cannot exist is reported like one that does not
    task_id = _parse_id(raw_id)
    task = await store.get(task_id, owner_id=owner_id) if task_id is not None else None
    if not task:
        raise NotFoundError("Task not found")
    return task


@router.get("/", response_model=Envelope[List[TaskResponse]])
async def list_tasks(
        status_filter: Optional[str] = Query(default=None, alias="status"),
        principal: deps.Principal = Depends(deps.get_current_principal),
        store: TaskStore = Depends(deps.get_task_store),
        settings: Settings = Depends(deps.get_app_settings),
):
    tasks = await store.list(status=status_filter, owner_id=_scope(principal, settings))
    return Envelope[List[TaskResponse]](
        status=status.HTTP_200_OK,
        message="Tasks retrieved successfully",
        data=[TaskResponse.model_validate(t) for t in tasks],
    )


@router.post("/", response_model=Envelope[TaskResponse], status_code=status.HTTP_201_CREATED)
async def create_task(
        task_in: TaskIn,
        principal: Optional[deps.Principal] = Depends(deps.get_current_principal),
        store: TaskStore = Depends(deps.get_task_store),
):
    if principal is None:
        raise AuthError("Unauthorized")

    task = await store.create(
        user_id=principal.user_id,
        title=task_in.title,
        content=task_in.content,
        status=task_in.status,
    )
    return Envelope[TaskResponse](
        status=status.HTTP_201_CREATED,
        message="Task created successfully",
        data=TaskResponse.model_validate(task),
    )


@router.get("/{task_id}", response_model=Envelope[TaskResponse])
async def get_task(
        task_id: str,
        principal: deps.Principal = Depends(deps.get_current_principal),
        store: TaskStore = Depends(deps.get_task_store),
        settings: Settings = Depends(deps.get_app_settings),
):
    task = await _get_or_404(store, task_id, _scope(principal, settings))
    return Envelope[TaskResponse](
        status=status.HTTP_200_OK,
        message="Task retrieved successfully",
        data=TaskResponse.model_validate(task),
    )


@router.put(
    "/{task_id}",
    response_model=Envelope[TaskResponse],
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": TaskIn.model_json_schema()}},
            "required": True,
        }
    },
)
async def update_task(
        task_id: str,
        request: Request,
        principal: deps.Principal = Depends(deps.get_current_principal),
        store: TaskStore = Depends(deps.get_task_store),
        settings: Settings = Depends(deps.get_app_settings),
):
    task = await _get_or_404(store, task_id, _scope(principal, settings))

    # The body is bound only once the task is known to exist: 404 wins over 400
    try:
        task_in = TaskIn.model_validate(await request.json())
    except ValueError:
        # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
        raise ValidationError()

    # Full replacement: fields missing from the body are reset to ""
    task = await store.replace(
        task,
        title=task_in.title,
        content=task_in.content,
        status=task_in.status,
    )
    return Envelope[TaskResponse](
        status=status.HTTP_200_OK,
        message="Task updated successfully",
        data=TaskResponse.model_validate(task),
    )


@router.delete("/{task_id}", response_model=Envelope[None])
async def delete_task(
        task_id: str,
        principal: deps.Principal = Depends(deps.get_current_principal),
        store: TaskStore = Depends(deps.get_task_store),
        settings: Settings = Depends(deps.get_app_settings),
):
    task = await _get_or_404(store, task_id, _scope(principal, settings))
    await store.soft_delete(task)
    return Envelope[None](status=status.HTTP_200_OK, message="Task deleted successfully")
