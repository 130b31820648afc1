"""
Authentication service implementation.

Registers accounts, checks credentials and validates tokens. bcrypt
hashing and checking run in the threadpool; token signing is delegated
to TokenService.
"""

import logging
from typing import Optional

from starlette.concurrency import run_in_threadpool

from shared.models import AuthenticatedUser

from .exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    MissingFieldsError,
    UserNotFoundError,
)
from .interfaces import IAuthService, ITokenService, IUserRepository
from .models import (
    LoginRequest,
    NewUser,
    RegisterRequest,
    TokenResponse,
    User,
)
from .passwords import DEFAULT_ROUNDS, hash_password, verify_password

logger = logging.getLogger(__name__)


def _missing(values: dict[str, Optional[str]]) -> list[str]:
    """Names of values that are absent or blank."""
    return [name for name, value in values.items() if value is None or not value.strip()]


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Depends only on the credential store and token service interfaces,
    so tests can wire it to an in-memory store.
    """

    def __init__(
        self,
        users: IUserRepository,
        tokens: ITokenService,
        bcrypt_rounds: int = DEFAULT_ROUNDS,
    ):
        self._users = users
        self._tokens = tokens
        self._bcrypt_rounds = bcrypt_rounds

    async def register(self, request: RegisterRequest) -> TokenResponse:
        """
        Create an account and return a token for it.

        Nothing is persisted and no token is issued unless every check passes.
        """
        missing = _missing({
            "firstName": request.first_name,
            "lastName": request.last_name,
            "email": request.email,
            "password": request.password,
        })
        if missing:
            raise MissingFieldsError(missing)

        if self._users.get_by_email(request.email) is not None:
            raise DuplicateEmailError(request.email)

        # The store's unique constraint still guards concurrent registrations
        record = self._users.create(NewUser(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            password_hash=await run_in_threadpool(hash_password, request.password, self._bcrypt_rounds),
        ))

        logger.info("Registered user %s", record.id)
        return TokenResponse(token=self._tokens.issue(record.id))

    async def login(self, request: LoginRequest) -> TokenResponse:
        """Check credentials and return a token. Never mutates the store."""
        missing = _missing({"email": request.email, "password": request.password})
        if missing:
            raise MissingFieldsError(missing)

        record = self._users.get_by_email(request.email)
        if record is None:
            raise UserNotFoundError(request.email)

        if not await run_in_threadpool(verify_password, request.password, record.password_hash):
            raise InvalidCredentialsError()

        logger.info("User %s logged in", record.id)
        return TokenResponse(token=self._tokens.issue(record.id))

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Validate a token and return the identity context.

        Pure verification: the store is not consulted.
        """
        claims = self._tokens.verify(token)
        return AuthenticatedUser(
            id=claims.sub,
            issued_at=claims.issued_at,
            expires_at=claims.expires_at,
        )

    async def get_user(self, user_id: str) -> Optional[User]:
        record = self._users.get_by_id(user_id)
        if record is None:
            return None
        return record.to_user()
