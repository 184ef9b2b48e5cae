"""
FoodHub Backend — Request Dependencies
========================================

What:  The bearer-token guard placed in front of every protected route.
How:   HTTPBearer(auto_error=False) extracts "Authorization: Bearer <token>";
       we raise AuthenticationError ourselves so a missing header and a bad
       token both produce the same 401 body from the global handler.

Usage:
    @router.get("/users")
    async def list_users(user_id: UUID = Depends(get_current_user_id), ...):
        ...
"""

import uuid
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from foodhub.exceptions import AuthenticationError
from foodhub.security import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False, description="JWT issued by POST /api/login")


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> uuid.UUID:
    """
    Resolve the authenticated user id from the request's bearer token.

    Raises:
        AuthenticationError (401): header missing, not a Bearer scheme,
        or token rejected by decode_access_token().
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError(message="Access denied. No token provided.")
    return decode_access_token(credentials.credentials)
