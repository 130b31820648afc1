"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the ``users`` table.
Email uniqueness is enforced by the table's unique constraint; the
in-memory implementation enforces it itself.
"""

from datetime import datetime, timezone
from typing import Optional, Any
import uuid

from postgrest.exceptions import APIError

from shared.repository import BaseRepository
from .exceptions import DuplicateEmailError
from .models import NewUser, UserRecord


USERS_TABLE = "users"


class SupabaseUserRepository(BaseRepository[UserRecord]):
    """
    Credential store backed by the Supabase ``users`` table.

    Note: This repository does NOT perform authorization checks.
    """

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        result = self._db.table(USERS_TABLE).select("*").eq("email", email).limit(1).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        result = self._db.table(USERS_TABLE).select("*").eq("id", user_id).limit(1).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def create(self, data: NewUser) -> UserRecord:
        """
        Insert a new user row.

        Raises:
            DuplicateEmailError: If the unique constraint on email rejects the row
        """
        try:
            result = self._db.table(USERS_TABLE).insert(data.model_dump()).execute()
        except APIError as e:
            if self.is_unique_violation(e, column="email"):
                raise DuplicateEmailError(data.email) from e
            raise
        return self._map_to_user(result.data[0])

    def _map_to_user(self, row: dict[str, Any]) -> UserRecord:
        return UserRecord(
            id=str(row["id"]),
            first_name=row["first_name"],
            last_name=row["last_name"],
            email=row["email"],
            password_hash=row["password_hash"],
            location=row.get("location"),
            created_at=row.get("created_at"),
        )


class InMemoryUserRepository:
    """
    Credential store kept in process memory.

    For testing and local development.
    """

    def __init__(self) -> None:
        self._users: dict[str, UserRecord] = {}

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        return self._users.get(user_id)

    def create(self, data: NewUser) -> UserRecord:
        if self.get_by_email(data.email) is not None:
            raise DuplicateEmailError(data.email)

        record = UserRecord(
            id=str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc),
            **data.model_dump(),
        )
        self._users[record.id] = record
        return record

    def __len__(self) -> int:
        return len(self._users)
