"""
Business logic for exercises.

Exercises reference their owner by id only; there is no foreign key.
``create_exercise`` checks that the user exists and then inserts in a
separate statement, so a user deleted between the two calls leaves an
orphan exercise behind.  That window is accepted.
"""

import logging
from typing import List, Tuple

from ..core.db import get_cursor, new_object_id, run_query
from ..schemas.exercise import ExerciseCreate, ExerciseRead, ExerciseRow, LogQuery
from ..schemas.user import DeleteResult, UserRead
from .log_service import to_date_string
from .user_service import UserService

logger = logging.getLogger(__name__)


class ExerciseService:
    """Log exercises against users and query them back."""

    @classmethod
    async def create_exercise(cls, user_id: str, data: ExerciseCreate) -> ExerciseRead:
        """Store an exercise for an existing user and return the echo payload.

        Raises ``NotFoundError`` if the user does not exist.  The stored
        username is a copy taken at creation time.
        """
        user = await UserService.get_user(user_id)
        logger.info("Adding exercise '%s' for user %s", data.description, user.id)
        await run_query(cls._insert, user, data)
        return ExerciseRead(
            username=user.username,
            description=data.description,
            duration=data.duration,
            date=to_date_string(data.date),
            id=user.id,
        )

    @classmethod
    async def query_log(cls, user_id: str, query: LogQuery) -> Tuple[UserRead, List[ExerciseRow]]:
        """Return the user and their exercises within ``query``'s bounds.

        Dates are compared as ``YYYY-MM-DD`` strings, which orders them
        chronologically.  Both bounds are inclusive.  Rows come back by
        date, then in insertion order.  ``limit`` 0 means no cap.
        """
        user = await UserService.get_user(user_id)
        rows = await run_query(cls._select_range, user.id, query)
        logger.info(
            "Log for user %s between %s and %s: %s entries",
            user.id,
            query.from_date,
            query.to_date,
            len(rows),
        )
        return user, rows

    @classmethod
    async def delete_all_exercises(cls) -> DeleteResult:
        deleted = await run_query(cls._delete_all)
        logger.info("Deleted %s exercises", deleted)
        return DeleteResult(deleted_count=deleted)

    @staticmethod
    def _insert(user: UserRead, data: ExerciseCreate) -> str:
        exercise_id = new_object_id()
        with get_cursor() as cursor:
            cursor.execute(
                """
                INSERT INTO exercises (id, user_id, username, description, duration, date)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (exercise_id, user.id, user.username, data.description, data.duration, data.date),
            )
        return exercise_id

    @staticmethod
    def _select_range(user_id: str, query: LogQuery) -> List[ExerciseRow]:
        sql = (
            "SELECT description, duration, date FROM exercises "
            "WHERE user_id = ? AND date >= ? AND date <= ? "
            "ORDER BY date, rowid"
        )
        params: list = [user_id, query.from_date, query.to_date]
        if query.limit:
            sql += " LIMIT ?"
            params.append(query.limit)
        with get_cursor() as cursor:
            rows = cursor.execute(sql, tuple(params)).fetchall()
        return [
            ExerciseRow(description=row["description"], duration=row["duration"], date=row["date"])
            for row in rows
        ]

    @staticmethod
    def _delete_all() -> int:
        with get_cursor() as cursor:
            cursor.execute("DELETE FROM exercises")
            return cursor.rowcount
