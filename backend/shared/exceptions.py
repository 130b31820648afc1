"""
Error hierarchy shared by every StyleStash module.

Services raise these; route handlers translate them into HTTP responses
at their own boundary. Module-specific errors subclass the bases below.
"""

from typing import Optional, Any


class StyleStashError(Exception):
    """
    Root of all application errors.

    Attributes:
        message: Human-readable text, safe to return to the client
        code: Machine-readable identifier (defaults to the class name)
        details: Extra context for logs and callers
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or type(self).__name__
        self.details = dict(details or {})


class ValidationError(StyleStashError):
    """Request data is missing or malformed. Answered with 400."""


class ConflictError(StyleStashError):
    """The record clashes with a stored one, such as a taken email. Answered with 400."""


class AuthenticationError(StyleStashError):
    """Credentials or token were rejected. Answered with 401."""


class ConfigurationError(StyleStashError):
    """A required setting is absent; raised at startup."""


class ExternalServiceError(StyleStashError):
    """A call to a hosted dependency (store or media host) failed."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
