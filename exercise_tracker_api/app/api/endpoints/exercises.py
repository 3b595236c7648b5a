"""
Exercise endpoints.

Logging an exercise for a user, reading a user's exercise log and
bulk-deleting exercises.  A missing user maps to 404, unparseable input
to 400 and storage failures to 500.
"""

import logging
from datetime import date
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from exercise_tracker_api.app.api.deps import read_payload
from exercise_tracker_api.app.core.clock import get_today
from exercise_tracker_api.app.core.errors import NotFoundError, StoreError, ValidationError
from exercise_tracker_api.app.core.security import require_admin_token
from exercise_tracker_api.app.schemas.exercise import ExerciseCreate, ExerciseRead, LogQuery, LogResponse
from exercise_tracker_api.app.schemas.user import DeleteResponse
from exercise_tracker_api.app.services.exercise_service import ExerciseService
from exercise_tracker_api.app.services.log_service import assemble_log

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/users/{user_id}/exercises", response_model=ExerciseRead)
async def add_exercise(
    user_id: str,
    payload: Dict[str, Any] = Depends(read_payload),
    today: date = Depends(get_today),
) -> ExerciseRead:
    """Log an exercise for a user.

    The body carries ``description``, ``duration`` (minutes) and an
    optional ``date`` (``YYYY-MM-DD``, defaults to today).  The
    response echoes the exercise with the date in long form and the
    user's id as ``_id``.
    """
    logger.info("Add a new exercise")
    try:
        data = ExerciseCreate.from_payload(payload, today)
        return await ExerciseService.create_exercise(user_id, data)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found!") from e
    except StoreError as e:
        logger.error("Error adding exercise: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Exercise creation failed!",
        ) from e


@router.get("/users/{user_id}/logs", response_model=LogResponse)
async def get_user_log(
    user_id: str,
    from_: Optional[str] = Query(None, alias="from"),
    to: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    today: date = Depends(get_today),
) -> LogResponse:
    """Return a user's exercise log.

    - **from**, **to**: inclusive ``YYYY-MM-DD`` bounds; default to
      1970-01-01 and today.
    - **limit**: maximum number of entries; 0 or absent means all.
    """
    logger.info("Get the log from a user")
    try:
        query = LogQuery.from_params(from_, to, limit, today)
        user, rows = await ExerciseService.query_log(user_id, query)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found!") from e
    except StoreError as e:
        logger.error("Error getting user logs: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error retrieving user logs!",
        ) from e
    return assemble_log(user, rows)


@router.delete("/exercises", response_model=DeleteResponse, dependencies=[Depends(require_admin_token)])
async def delete_all_exercises() -> DeleteResponse:
    """Delete every exercise of every user."""
    logger.info("Delete all exercises")
    try:
        result = await ExerciseService.delete_all_exercises()
    except StoreError as e:
        logger.error("Error deleting exercises: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Deleting all exercises failed!",
        ) from e
    return DeleteResponse(message="All exercises have been deleted!", result=result)
