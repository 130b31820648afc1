"""
Authentication module exceptions.

These exceptions are raised by the auth module and translated into HTTP
responses by the route handlers and the auth gate.
"""

from typing import Optional

from shared.exceptions import AuthenticationError, ConflictError, ValidationError


class MissingFieldsError(ValidationError):
    """Raised when required registration or login fields are absent."""

    def __init__(self, fields: list[str]):
        super().__init__(
            "Please enter all fields",
            code="MISSING_FIELDS",
            details={"fields": fields},
        )
        self.fields = fields


class DuplicateEmailError(ConflictError):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            "User already exists",
            code="DUPLICATE_EMAIL",
            details={"email": email},
        )


class InvalidCredentialsError(AuthenticationError):
    """Raised when the password does not match the stored hash."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class UserNotFoundError(AuthenticationError):
    """Raised when no account exists for the given email or ID."""

    def __init__(self, identifier: str):
        super().__init__(
            "User does not exist",
            code="USER_NOT_FOUND",
            details={"identifier": identifier},
        )


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "No token, authorization denied"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidTokenError(AuthenticationError):
    """Raised when a token is malformed or its signature does not verify."""

    def __init__(
        self,
        message: str = "Token is not valid",
        code: str = "INVALID_TOKEN",
        reason: Optional[str] = None,
    ):
        super().__init__(message, code=code, details={"reason": reason} if reason else None)
        self.reason = reason


class ExpiredTokenError(InvalidTokenError):
    """Raised when a token is past its expiration instant."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")
