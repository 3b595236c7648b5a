"""
Pydantic models and input parsing for exercises and logs.

Request payloads arrive either as JSON or as HTML form fields, so every
value may be a string.  The ``parse_*`` helpers turn raw values into
typed ones and raise ``ValidationError`` instead of coercing bad input
to a placeholder value.
"""

import re
from datetime import date
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, Field

from ..core.clock import EPOCH_DATE
from ..core.errors import ValidationError

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_INT_RE = re.compile(r"^[+-]?\d+$")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_date(value: Any, field: str = "date") -> Optional[str]:
    """Validate a ``YYYY-MM-DD`` value and return it normalised, or ``None`` if blank."""
    if _is_blank(value):
        return None
    if not isinstance(value, str) or not _DATE_RE.match(value.strip()):
        raise ValidationError(f"{field} must be a date in YYYY-MM-DD format")
    try:
        return date.fromisoformat(value.strip()).isoformat()
    except ValueError as exc:
        raise ValidationError(f"{field} is not a valid calendar date") from exc


def parse_int(value: Any, field: str) -> int:
    """Parse an integer from a JSON number or a decimal string.

    Values outside SQLite's signed 64-bit INTEGER range are rejected.
    """
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be an integer")
    if isinstance(value, int):
        number = value
    elif isinstance(value, float) and value.is_integer():
        number = int(value)
    elif isinstance(value, str) and _INT_RE.match(value.strip()):
        text = value.strip()
        digits = text.lstrip("+-").lstrip("0") or "0"
        if len(digits) > len(str(INT64_MAX)):
            raise ValidationError(f"{field} is out of range")
        number = -int(digits) if text.startswith("-") else int(digits)
    else:
        raise ValidationError(f"{field} must be an integer")
    if not INT64_MIN <= number <= INT64_MAX:
        raise ValidationError(f"{field} is out of range")
    return number


def parse_required_text(value: Any, field: str) -> str:
    if _is_blank(value) or not isinstance(value, str):
        raise ValidationError(f"{field} is required")
    return value.strip()


class ExerciseCreate(BaseModel):
    """Validated payload for ``POST /api/users/{_id}/exercises``."""

    description: str
    duration: int
    date: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any], today: date) -> "ExerciseCreate":
        """Parse a raw request body; a missing or blank date becomes ``today``."""
        description = parse_required_text(payload.get("description"), "description")
        if _is_blank(payload.get("duration")):
            raise ValidationError("duration is required")
        duration = parse_int(payload.get("duration"), "duration")
        exercise_date = parse_date(payload.get("date")) or today.isoformat()
        return cls(description=description, duration=duration, date=exercise_date)


class ExerciseRead(BaseModel):
    """Echo returned after logging an exercise.  ``_id`` is the owner's id."""

    username: str
    description: str
    duration: int
    date: str = Field(..., examples=["Sun Jan 15 2023"])
    id: str = Field(..., alias="_id")

    model_config = {
        "populate_by_name": True,
    }


class ExerciseRow(BaseModel):
    """Stored exercise fields selected by the log query."""

    description: str
    duration: int
    date: str


class LogQuery(BaseModel):
    """Inclusive date range and row cap for a log query."""

    from_date: str = EPOCH_DATE
    to_date: str
    limit: int = 0

    @classmethod
    def from_params(
        cls,
        from_: Any,
        to: Any,
        limit: Any,
        today: date,
    ) -> "LogQuery":
        """Apply defaults: ``from`` is the epoch, ``to`` is ``today``, no limit."""
        if _is_blank(limit):
            row_cap = 0
        else:
            row_cap = parse_int(limit, "limit")
            if row_cap < 0:
                raise ValidationError("limit must not be negative")
        return cls(
            from_date=parse_date(from_, "from") or EPOCH_DATE,
            to_date=parse_date(to, "to") or today.isoformat(),
            limit=row_cap,
        )


class LogEntry(BaseModel):
    description: str
    duration: int
    date: str


class LogResponse(BaseModel):
    """Response of ``GET /api/users/{_id}/logs``."""

    id: str = Field(..., alias="_id")
    username: str
    count: int
    log: List[LogEntry]

    model_config = {
        "populate_by_name": True,
    }
