"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

from typing import TypeVar, Generic, Optional
from postgrest.exceptions import APIError
from supabase import Client


T = TypeVar("T")

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class ItemRepository(BaseRepository[Item]):
            def get_by_id(self, item_id: str) -> Optional[Item]:
                result = self._db.table("items").select("*").eq("id", item_id).execute()
                if not result.data:
                    return None
                return self._map_to_item(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    @staticmethod
    def is_unique_violation(error: APIError, column: Optional[str] = None) -> bool:
        """
        Check whether a PostgREST error was caused by a unique constraint.

        Args:
            error: The error raised by the Supabase client.
            column: Optionally require the constraint message to mention this column.
        """
        if error.code != UNIQUE_VIOLATION:
            return False
        if column is None:
            return True
        text = f"{error.message or ''} {error.details or ''}"
        return column in text
