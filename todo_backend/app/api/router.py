# todo_backend/app/api/router.py
from fastapi import APIRouter

from todo_backend.app.api.endpoints import auth, tasks

api_router = APIRouter()
# /register and /login are public
api_router.include_router(auth.router, tags=["auth"])
# Every /tasks route depends on get_current_principal
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
