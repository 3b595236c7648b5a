"""
User endpoints.

Creation, listing and bulk deletion of users.  Storage failures are
logged and collapsed to a 500 with a fixed message.
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from exercise_tracker_api.app.api.deps import read_payload
from exercise_tracker_api.app.core.errors import StoreError, ValidationError
from exercise_tracker_api.app.core.security import require_admin_token
from exercise_tracker_api.app.schemas.user import DeleteResponse, UserCreated, UserRead
from exercise_tracker_api.app.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[UserRead])
async def list_users() -> List[UserRead]:
    """List all users.  An empty database yields ``[]``."""
    logger.info("Get all users")
    try:
        return await UserService.list_users()
    except StoreError as e:
        logger.error("Error getting users: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Getting all users failed!",
        ) from e


@router.post("", response_model=UserCreated)
async def create_user(payload: Dict[str, Any] = Depends(read_payload)) -> UserCreated:
    """Create a user from a JSON or form body with a ``username`` field."""
    logger.info("Create a new user")
    try:
        user = await UserService.create_user(payload.get("username"))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except StoreError as e:
        logger.error("Error creating user: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="User creation failed!",
        ) from e
    return UserCreated(username=user.username, id=user.id)


@router.delete("", response_model=DeleteResponse, dependencies=[Depends(require_admin_token)])
async def delete_all_users() -> DeleteResponse:
    """Delete every user.  Their exercises are kept."""
    logger.info("Delete all users")
    try:
        result = await UserService.delete_all_users()
    except StoreError as e:
        logger.error("Error deleting users: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Deleting all users failed!",
        ) from e
    return DeleteResponse(message="All users have been deleted!", result=result)
