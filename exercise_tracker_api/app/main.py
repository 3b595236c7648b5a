"""
Main entrypoint for the Exercise Tracker API.

This module assembles the FastAPI application: logging, CORS, the
per-request timeout, JSON error rendering, the static landing page and
the ``/api`` routes.  ``create_app`` builds the app, which is then
instantiated at module import time as ``app``::

    uvicorn exercise_tracker_api.app.main:app --reload
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router as api_router
from .core.config import settings
from .core.db import count_rows, get_database_path, init_db
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
VIEWS_DIR = BASE_DIR / "views"
PUBLIC_DIR = BASE_DIR / "public"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Apply migrations before serving and report what is stored."""
    init_db()
    logger.info("Connected to database %s", get_database_path())
    logger.info(
        "Documents in database: %s users, %s exercises",
        count_rows("users"),
        count_rows("exercises"),
    )
    yield
    logger.info("Shutting down")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    first = exc.errors()[0] if exc.errors() else {}
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": first.get("msg", "Invalid request")},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured application instance ready to be served.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)

    # Registered before CORS so that CORS wraps it and 504s carry CORS headers.
    @app.middleware("http")
    async def enforce_request_timeout(request: Request, call_next):
        try:
            return await asyncio.wait_for(call_next(request), timeout=settings.request_timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning("Request %s %s timed out", request.method, request.url.path)
            return JSONResponse(
                status_code=status.HTTP_504_GATEWAY_TIMEOUT,
                content={"message": "Request timed out!"},
            )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.mount("/public", StaticFiles(directory=PUBLIC_DIR), name="public")

    @app.get("/", include_in_schema=False)
    async def index() -> FileResponse:
        return FileResponse(VIEWS_DIR / "index.html")

    @app.get("/healthz", tags=["health"])
    async def healthz() -> dict:
        return {"ok": True}

    app.include_router(api_router, prefix="/api")

    return app


# Create the application instance at import time so that uvicorn can
# discover it without calling create_app manually.
app = create_app()
