"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Identity context of an authenticated request.

    Populated from verified token claims by the auth gate and passed to
    route handlers as an explicit parameter via dependency injection.
    """

    id: str = Field(..., description="User ID (UUID)")
    issued_at: Optional[datetime] = Field(None, description="When the token was issued")
    expires_at: Optional[datetime] = Field(None, description="When the token expires")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
