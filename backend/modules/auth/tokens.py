"""
Token issuing and verification.

Tokens are HS256-signed JWTs carrying the user ID in ``sub`` and an
expiration 30 days after issuance. Nothing is persisted: a token is valid
as long as its signature matches the configured secret and it has not
expired, so rotating the secret invalidates every outstanding token.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.exceptions import ConfigurationError

from .exceptions import ExpiredTokenError, InvalidTokenError, MissingTokenError
from .models import TokenClaims

DEFAULT_TTL = timedelta(days=30)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """Signs and verifies identity tokens with a process-wide secret."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = DEFAULT_TTL,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise ConfigurationError(
                "Token signing secret is not configured. Set STYLESTASH_JWT_SECRET."
            )
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl
        self._clock = clock or _utcnow

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, user_id: str) -> str:
        """Sign a token for ``user_id`` expiring ``ttl`` from now."""
        now = self._clock()
        payload = {
            "sub": user_id,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: Optional[str]) -> TokenClaims:
        """
        Verify a token and return its claims.

        Raises:
            MissingTokenError: If ``token`` is empty or None
            ExpiredTokenError: If the expiration instant has passed
            InvalidTokenError: For any other verification failure
        """
        if not token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "iat", "exp"]},
            )
            return TokenClaims(**payload)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(reason=str(e))
        except PydanticValidationError:
            raise InvalidTokenError(reason="malformed claims")
