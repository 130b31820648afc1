"""
Authentication module.

Handles registration, login, token issuing/verification and the
credential store.

Public API:
- IAuthService: Interface for auth operations
- AuthService: Implementation wired to a user repository and token service
- TokenService: Signs and verifies identity tokens
- Auth exceptions: MissingTokenError, InvalidTokenError, etc.
"""

from .interfaces import IAuthService, ITokenService, IUserRepository
from .models import (
    LoginRequest,
    RegisterRequest,
    TokenClaims,
    TokenResponse,
    User,
    UserRecord,
)
from .exceptions import (
    DuplicateEmailError,
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingFieldsError,
    MissingTokenError,
    UserNotFoundError,
)
from .service import AuthService
from .tokens import TokenService

__all__ = [
    # Interfaces
    "IAuthService",
    "ITokenService",
    "IUserRepository",
    # Implementations
    "AuthService",
    "TokenService",
    # Models
    "LoginRequest",
    "RegisterRequest",
    "TokenClaims",
    "TokenResponse",
    "User",
    "UserRecord",
    # Exceptions
    "DuplicateEmailError",
    "ExpiredTokenError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MissingFieldsError",
    "MissingTokenError",
    "UserNotFoundError",
]
