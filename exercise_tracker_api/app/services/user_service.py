"""
Business logic for users.

``UserService`` stores users in SQLite.  Blocking queries run in the
worker thread pool through ``run_query``; storage failures surface as
``StoreError``.
"""

import logging
from typing import Any, List, Optional

from ..core.db import get_cursor, is_object_id, new_object_id, run_query
from ..core.errors import InvalidIdError, NotFoundError, ValidationError
from ..schemas.user import DeleteResult, UserRead

logger = logging.getLogger(__name__)


class UserService:
    """Create, list, fetch and bulk-delete users."""

    @classmethod
    async def create_user(cls, username: Any) -> UserRead:
        """Insert a user with a generated id.

        Duplicate usernames are allowed.  A missing or blank username
        raises ``ValidationError``.
        """
        if username is None or not isinstance(username, str) or not username.strip():
            raise ValidationError("username is required")
        username = username.strip()
        logger.info("Creating user %s", username)
        return await run_query(cls._insert, username)

    @classmethod
    async def list_users(cls) -> List[UserRead]:
        """Return every user in creation order."""
        users = await run_query(cls._select_all)
        logger.info("Users in database: %s", len(users))
        return users

    @classmethod
    async def get_user(cls, user_id: str) -> UserRead:
        """Fetch one user.

        Raises ``InvalidIdError`` for malformed ids and ``NotFoundError``
        when no user has the id.
        """
        if not is_object_id(user_id):
            raise InvalidIdError(user_id)
        user = await run_query(cls._select_one, user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        return user

    @classmethod
    async def delete_all_users(cls) -> DeleteResult:
        """Remove every user.  Exercises are left in place."""
        deleted = await run_query(cls._delete_all)
        logger.info("Deleted %s users", deleted)
        return DeleteResult(deleted_count=deleted)

    @staticmethod
    def _insert(username: str) -> UserRead:
        user_id = new_object_id()
        with get_cursor() as cursor:
            cursor.execute(
                "INSERT INTO users (id, username) VALUES (?, ?)",
                (user_id, username),
            )
        return UserRead(id=user_id, username=username)

    @staticmethod
    def _select_all() -> List[UserRead]:
        with get_cursor() as cursor:
            rows = cursor.execute(
                "SELECT id, username FROM users ORDER BY rowid"
            ).fetchall()
        return [UserRead(id=row["id"], username=row["username"]) for row in rows]

    @staticmethod
    def _select_one(user_id: str) -> Optional[UserRead]:
        with get_cursor() as cursor:
            row = cursor.execute(
                "SELECT id, username FROM users WHERE id = ?", (user_id,)
            ).fetchone()
        if not row:
            return None
        return UserRead(id=row["id"], username=row["username"])

    @staticmethod
    def _delete_all() -> int:
        with get_cursor() as cursor:
            cursor.execute("DELETE FROM users")
            return cursor.rowcount
