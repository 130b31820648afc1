"""
Authentication API endpoints.

Registration and login are public; both answer with a freshly issued token.
"""

import logging
from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_auth_service
from shared.exceptions import AuthenticationError, ConflictError, ValidationError

from .interfaces import IAuthService
from .models import LoginRequest, RegisterRequest, TokenResponse

logger = logging.getLogger(__name__)

# Login failures share one message so the response does not reveal
# whether the email exists.
INVALID_CREDENTIALS = "Invalid credentials"

router = APIRouter()


@router.post("/register", response_model=TokenResponse)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> TokenResponse:
    """
    Create an account and return a token for it.

    Fails with 400 if a field is missing or the email is taken.
    """
    try:
        return await service.register(request)
    except (ValidationError, ConflictError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except Exception as e:
        logger.exception("Registration failed")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> TokenResponse:
    """
    Exchange email and password for a token.

    Fails with 400 if a field is missing and 401 if the credentials are wrong.
    """
    try:
        return await service.login(request)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except AuthenticationError as e:
        logger.info("Login rejected: %s", e.code)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)
    except Exception as e:
        logger.exception("Login failed")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
