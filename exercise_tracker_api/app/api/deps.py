"""
Shared request dependencies.

The landing page submits HTML forms while API clients send JSON, so
POST bodies are read through ``read_payload`` which accepts both.
"""

from typing import Any, Dict

from fastapi import HTTPException, Request, status

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_payload(request: Request) -> Dict[str, Any]:
    """Return the request body as a flat dictionary.

    Unknown or missing content types yield an empty dictionary so the
    service layer reports the missing fields.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type == "application/json":
        raw = await request.body()
        if not raw:
            return {}
        try:
            body = await request.json()
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Request body is not valid JSON",
            ) from exc
        if not isinstance(body, dict):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Request body must be a JSON object",
            )
        return body
    if content_type in _FORM_TYPES:
        form = await request.form()
        return {key: value for key, value in form.items()}
    return {}
