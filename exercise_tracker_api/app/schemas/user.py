"""
Pydantic models for user data.

Identifiers are serialised under ``_id``.  Because pydantic treats
leading underscores as private, the attribute is called ``id`` and the
wire name is provided as an alias.
"""

from pydantic import BaseModel, Field


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: str = Field(..., alias="_id", examples=["65a1f0c2e4b0a1b2c3d4e5f6"])
    username: str = Field(..., examples=["fcc_test"])

    model_config = {
        "populate_by_name": True,
    }


class UserCreated(BaseModel):
    """Response of ``POST /api/users``; username first, like the listing."""

    username: str
    id: str = Field(..., alias="_id")

    model_config = {
        "populate_by_name": True,
    }


class DeleteResult(BaseModel):
    """Summary of a bulk delete."""

    acknowledged: bool = True
    deleted_count: int = Field(..., alias="deletedCount")

    model_config = {
        "populate_by_name": True,
    }


class DeleteResponse(BaseModel):
    message: str
    result: DeleteResult
