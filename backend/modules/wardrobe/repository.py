"""
Item repository for database access.

Encapsulates all Supabase queries and data mapping for the ``items`` table.
"""

from datetime import datetime, timezone
from typing import Optional, Any
import uuid

from shared.repository import BaseRepository
from .models import Item, NewItem


ITEMS_TABLE = "items"


class SupabaseItemRepository(BaseRepository[Item]):
    """
    Item store backed by the Supabase ``items`` table.

    Note: This repository does NOT perform authorization checks.
    The service layer passes the owner ID from the identity context.
    """

    def create(self, data: NewItem) -> Item:
        row = data.model_dump(mode="json")
        result = self._db.table(ITEMS_TABLE).insert(row).execute()
        return self._map_to_item(result.data[0])

    def list_for_user(self, user_id: str) -> list[Item]:
        result = self._db.table(ITEMS_TABLE).select("*").eq("user_id", user_id).execute()
        return [self._map_to_item(row) for row in result.data]

    def count_for_user(self, user_id: str, is_clean: Optional[bool] = None) -> int:
        query = self._db.table(ITEMS_TABLE).select("id", count="exact").eq("user_id", user_id)
        if is_clean is not None:
            query = query.eq("is_clean", is_clean)
        result = query.execute()
        return result.count or 0

    def _map_to_item(self, row: dict[str, Any]) -> Item:
        return Item(
            id=str(row["id"]),
            user_id=str(row["user_id"]),
            name=row["name"],
            image_url=row["image_url"],
            image_public_id=row.get("image_public_id"),
            category=row["category"],
            sub_category=row.get("sub_category"),
            seasons=row.get("seasons") or [],
            color=row.get("color"),
            warmth=row.get("warmth"),
            is_clean=row.get("is_clean", True),
            last_worn=row.get("last_worn"),
            created_at=row.get("created_at"),
        )


class InMemoryItemRepository:
    """
    Item store kept in process memory, in insertion order.

    For testing and local development.
    """

    def __init__(self) -> None:
        self._items: list[Item] = []

    def create(self, data: NewItem) -> Item:
        item = Item(
            id=str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc),
            **data.model_dump(),
        )
        self._items.append(item)
        return item

    def list_for_user(self, user_id: str) -> list[Item]:
        return [item for item in self._items if item.user_id == user_id]

    def count_for_user(self, user_id: str, is_clean: Optional[bool] = None) -> int:
        return sum(
            1
            for item in self._items
            if item.user_id == user_id and (is_clean is None or item.is_clean == is_clean)
        )

    def __len__(self) -> int:
        return len(self._items)
