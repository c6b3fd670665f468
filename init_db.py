import argparse
import asyncio

from todo_backend.app.core.config import get_settings
from todo_backend.app.core.logging import setup_logging
from todo_backend.app.db import init_models
from todo_backend.app.db.session import create_engine


async def main(reset: bool) -> None:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)
    engine = create_engine(settings)
    try:
        # --reset drops every table first - DEV MODE ONLY
        await init_models(engine, drop_all=reset)
    finally:
        await engine.dispose()
    print(">>> Tables Created Successfully!")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create the database tables")
    parser.add_argument("--reset", action="store_true", help="drop existing tables first")
    asyncio.run(main(parser.parse_args().reset))
