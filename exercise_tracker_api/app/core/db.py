"""
SQLite persistence and a small migration system.

This module provides the connection factory (``get_connection``), a
cursor context manager used by the services, schema migrations applied
on application start (``init_db``) and the opaque identifier helpers.

Records are addressed by 24-character hex tokens generated here rather
than by SQLite rowids, so the API never exposes storage internals.
Applied migration versions are stored in the ``migrations`` table and
new migrations are executed in order.
"""

import logging
import os
import re
import secrets
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, TypeVar

from starlette.concurrency import run_in_threadpool

from .config import settings
from .errors import StoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_SQLITE_URL_PREFIX = "sqlite:///"
_OBJECT_ID_RE = re.compile(r"^[0-9a-f]{24}$")

MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: initial schema.  ``exercises.user_id`` has
    # no foreign key; existence is checked by the service before insert.
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id TEXT PRIMARY KEY,
            username TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS exercises (
            id TEXT PRIMARY KEY,
            user_id TEXT NOT NULL,
            username TEXT NOT NULL,
            description TEXT NOT NULL,
            duration INTEGER NOT NULL,
            date TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
        """,
    ),
    # Migration 2: the log query filters on user and date range.
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_exercises_user_date ON exercises(user_id, date);
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    Accepts either a plain path or a ``sqlite:///path`` URL.  Relative
    paths are resolved against the current working directory.
    """
    db_url = settings.database_url
    if db_url.startswith(_SQLITE_URL_PREFIX):
        db_url = db_url[len(_SQLITE_URL_PREFIX):]
    if not db_url or db_url == ":memory:":
        # Each call opens a fresh connection, so an in-memory database
        # would be empty on every request.
        raise ValueError("DATABASE_URL must point to a database file")
    if os.path.isabs(db_url):
        return db_url
    return str((Path.cwd() / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  ``settings.db_timeout_seconds`` bounds how long a writer
    waits on a locked database.
    """
    conn = sqlite3.connect(get_database_path(), timeout=settings.db_timeout_seconds)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Yield a cursor, commit on success and always close the connection."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def new_object_id() -> str:
    """Return a fresh opaque identifier."""
    return secrets.token_hex(12)


def is_object_id(value: str) -> bool:
    """Tell whether ``value`` has the shape of an identifier from ``new_object_id``."""
    return bool(_OBJECT_ID_RE.match(value or ""))


def init_db() -> None:
    """Create the database if needed and apply pending migrations."""
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                logger.info("Applying migration %s", version)
                cursor.executescript(sql)
                cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                current_version = version


def count_rows(table: str) -> int:
    """Return the number of rows in one of the application tables."""
    if table not in {"users", "exercises"}:
        raise ValueError(f"Unknown table {table!r}")
    with get_cursor() as cursor:
        row = cursor.execute(f"SELECT COUNT(*) AS count FROM {table}").fetchone()
    return row["count"]


async def run_query(func: Callable[..., T], *args, **kwargs) -> T:
    """Run a blocking storage function in the worker thread pool.

    ``sqlite3.Error`` raised by ``func`` is re-raised as ``StoreError``
    so callers only deal with the domain taxonomy.
    """
    try:
        return await run_in_threadpool(func, *args, **kwargs)
    except sqlite3.Error as exc:
        logger.exception("Database call %s failed", getattr(func, "__qualname__", func))
        raise StoreError(str(exc)) from exc
