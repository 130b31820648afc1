"""
Shared infrastructure for StyleStash backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- logging_config: Root logger setup

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    StyleStashError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    ConfigurationError,
    ExternalServiceError,
)
from .logging_config import configure_logging
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "StyleStashError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "ConfigurationError",
    "ExternalServiceError",
    "configure_logging",
    "AuthenticatedUser",
]
