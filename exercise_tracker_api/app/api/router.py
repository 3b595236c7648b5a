"""
Top-level API router.

Aggregates the domain routers; ``main.create_app`` mounts it under
``/api``.
"""

from fastapi import APIRouter

from .endpoints import exercises, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
# The exercises router spans ``/users/{id}/...`` and ``/exercises`` so it
# defines full paths itself.
router.include_router(exercises.router, tags=["exercises"])
