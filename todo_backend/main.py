# todo_backend/main.py
import uvicorn

from todo_backend.app.core.config import get_settings


def run() -> None:
    """Entry point of the `todo-backend` command."""
    settings = get_settings()
    uvicorn.run(
        "todo_backend.app.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
    )


if __name__ == "__main__":
    run()
