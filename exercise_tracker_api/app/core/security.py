"""
Guard for destructive endpoints.

Bulk deletes wipe whole collections.  When ``ADMIN_TOKEN`` is set,
``require_admin_token`` only lets requests through that carry it as a
bearer token; when it is empty the endpoints stay open, which suits
local development and the test suite.
"""

import hmac
import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def token_matches(presented: str, expected: str) -> bool:
    """Constant-time comparison of two tokens."""
    return hmac.compare_digest(presented.encode("utf-8"), expected.encode("utf-8"))


def require_admin_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> None:
    """Dependency rejecting requests without the configured admin token."""
    expected = settings.admin_token
    if not expected:
        return
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if not token_matches(credentials.credentials, expected):
        logger.warning("Rejected destructive request with an invalid token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )
