"""
Wardrobe module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import DashboardStats, Item, ItemForm, NewItem


@runtime_checkable
class IItemRepository(Protocol):
    """Item store contract. Every query is scoped to one owner."""

    def create(self, data: NewItem) -> Item:
        ...

    def list_for_user(self, user_id: str) -> list[Item]:
        ...

    def count_for_user(self, user_id: str, is_clean: Optional[bool] = None) -> int:
        """Count a user's items, optionally only clean or only dirty ones."""
        ...


@runtime_checkable
class IWardrobeService(Protocol):
    """
    Interface for wardrobe operations.

    All methods take the owner's user ID from the identity context.
    """

    async def create_item(
        self,
        user_id: str,
        form: ItemForm,
        image: Optional[bytes],
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> Item:
        """
        Upload the image and store a new item.

        Raises:
            InvalidItemError: If a field is missing or malformed
            UnsupportedImageFormatError: If the image encoding is not allowed
            MediaUploadError: If the media host fails
        """
        ...

    async def list_items(self, user_id: str) -> list[Item]:
        ...

    async def get_dashboard_stats(self, user_id: str) -> DashboardStats:
        """
        Raises:
            UserNotFoundError: If the account no longer exists
        """
        ...

