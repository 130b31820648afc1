"""
Authentication module interface.

Other modules should depend on these protocols, not the concrete
implementations. This enables testing with in-memory stores.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser
from .models import (
    LoginRequest,
    NewUser,
    RegisterRequest,
    TokenClaims,
    TokenResponse,
    User,
    UserRecord,
)


@runtime_checkable
class IUserRepository(Protocol):
    """Credential store contract."""

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        """Find an account by exact (case-sensitive) email."""
        ...

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        """Find an account by its ID."""
        ...

    def create(self, data: NewUser) -> UserRecord:
        """
        Persist a new account.

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        ...


@runtime_checkable
class ITokenService(Protocol):
    """Stateless token issuing and verification."""

    def issue(self, user_id: str) -> str:
        """Sign a token for the given user ID."""
        ...

    def verify(self, token: Optional[str]) -> TokenClaims:
        """
        Verify a token and return its claims.

        Raises:
            MissingTokenError: If no token was supplied
            ExpiredTokenError: If the token has expired
            InvalidTokenError: If the token is malformed or badly signed
        """
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def register(self, request: RegisterRequest) -> TokenResponse:
        """
        Create an account and return a token for it.

        Raises:
            MissingFieldsError: If any required field is absent
            DuplicateEmailError: If the email is already registered
        """
        ...

    async def login(self, request: LoginRequest) -> TokenResponse:
        """
        Check credentials and return a token.

        Raises:
            MissingFieldsError: If email or password is absent
            UserNotFoundError: If no account has the email
            InvalidCredentialsError: If the password does not match
        """
        ...

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Validate a token and return the identity context.

        Raises:
            AuthenticationError: If the token is missing, invalid or expired
        """
        ...

    async def get_user(self, user_id: str) -> Optional[User]:
        """Get an account's public profile by ID."""
        ...
