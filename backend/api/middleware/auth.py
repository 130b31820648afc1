"""
Token authentication gate.

Reads the raw signed token from the ``x-auth-token`` header (no Bearer
prefix), verifies it and hands the identity context to the route handler
as a dependency value. Every authentication failure is answered with 401.
"""

import logging
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader

from shared.models import AuthenticatedUser
from modules.auth.exceptions import MissingTokenError
from modules.auth.interfaces import IAuthService
from shared.exceptions import AuthenticationError

from ..dependencies import get_auth_service

logger = logging.getLogger(__name__)

TOKEN_HEADER = "x-auth-token"

# Raw token extractor
token_header_scheme = APIKeyHeader(name=TOKEN_HEADER, auto_error=False)


class AuthError(HTTPException):
    """Authentication error with consistent format."""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
        )


async def get_current_user(
    token: Optional[str] = Depends(token_header_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if not token:
        raise AuthError(MissingTokenError().message)

    try:
        return await auth.validate_token(token)
    except AuthenticationError as e:
        logger.info("Rejected token: %s %s", e.code, e.details.get("reason", ""))
        raise AuthError(e.message)


# Type alias for cleaner route definitions
RequireAuth = Depends(get_current_user)
