"""Entry point for the Exercise Tracker API.

Starts the FastAPI application under Uvicorn.  Intended to be executed
from the project root, for example in Docker or on a PaaS where only a
single Python file is specified.

Configuration such as DATABASE_URL, PORT and LOG_LEVEL may be placed in
a `.env` file in the working directory.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from exercise_tracker_api.app.core.config import settings
from exercise_tracker_api.app.main import app


async def main() -> None:
    """Serve the API on ``settings.host``:``settings.port``."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Listening on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
