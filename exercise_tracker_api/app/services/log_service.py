"""
Shaping of exercise logs.

Pure functions only: no database access and no clock.  The stored
``YYYY-MM-DD`` dates are rendered in the long form used by the API
responses, e.g. ``"Sun Jan 15 2023"``.  Day and month names come from
fixed English tables so the output does not depend on the process
locale.
"""

from datetime import date
from typing import Iterable

from ..schemas.exercise import ExerciseRow, LogEntry, LogResponse
from ..schemas.user import UserRead

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def to_date_string(value: str) -> str:
    """Render ``YYYY-MM-DD`` as ``Www Mmm DD YYYY``."""
    day = date.fromisoformat(value)
    return f"{WEEKDAYS[day.weekday()]} {MONTHS[day.month - 1]} {day.day:02d} {day.year:04d}"


def assemble_log(user: UserRead, exercises: Iterable[ExerciseRow]) -> LogResponse:
    """Build the log response for ``user`` from already filtered rows."""
    log = [
        LogEntry(
            description=exercise.description,
            duration=exercise.duration,
            date=to_date_string(exercise.date),
        )
        for exercise in exercises
    ]
    return LogResponse(id=user.id, username=user.username, count=len(log), log=log)
