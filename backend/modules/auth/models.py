"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


DEFAULT_LOCATION = "New Delhi, India"


class RegisterRequest(BaseModel):
    """
    Registration payload.

    Every field is optional at the model level so that absent values are
    reported together by the service as a MissingFieldsError.
    """

    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    """Login payload."""

    email: Optional[str] = None
    password: Optional[str] = None


class TokenResponse(BaseModel):
    """Response carrying a freshly issued token."""

    token: str


class TokenClaims(BaseModel):
    """Decoded claims of a verified token."""

    sub: str = Field(..., description="Subject (user ID)")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")

    @property
    def issued_at(self) -> datetime:
        return datetime.fromtimestamp(self.iat, tz=timezone.utc)

    @property
    def expires_at(self) -> datetime:
        return datetime.fromtimestamp(self.exp, tz=timezone.utc)


class NewUser(BaseModel):
    """Data needed to persist a new account. The password is already hashed."""

    first_name: str
    last_name: str
    email: str
    password_hash: str
    location: str = DEFAULT_LOCATION


class User(BaseModel):
    """Public view of an account (never includes the password hash)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    first_name: str = Field(..., serialization_alias="firstName")
    last_name: str = Field(..., serialization_alias="lastName")
    email: str
    location: Optional[str] = DEFAULT_LOCATION
    created_at: Optional[datetime] = Field(None, serialization_alias="createdAt")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class UserRecord(User):
    """Stored account, including the salted password hash."""

    password_hash: str

    def to_user(self) -> User:
        return User(**self.model_dump(exclude={"password_hash"}))
