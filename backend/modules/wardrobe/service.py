"""
Wardrobe service implementation.

Creates and lists a user's clothing items and computes dashboard stats.
Item creation validates the whole record before uploading the image, and
deletes the uploaded image again if the store rejects the record, so a
failed request leaves nothing behind.
"""

import json
import logging
from typing import Optional, Any

from modules.auth.exceptions import UserNotFoundError
from modules.auth.interfaces import IUserRepository
from modules.media.interfaces import IMediaStorage

from .exceptions import InvalidItemError
from .interfaces import IItemRepository, IWardrobeService
from .models import (
    MAX_WARMTH,
    MIN_WARMTH,
    DashboardStats,
    Item,
    ItemForm,
    NewItem,
)

logger = logging.getLogger(__name__)

DEFAULT_FOLDER = "stylestash_uploads"


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def parse_seasons(raw: Optional[str]) -> list[str]:
    """
    Parse the JSON-encoded seasons array from the upload form.

    Absent or blank input yields an empty list. Order is preserved.

    Raises:
        InvalidItemError: If the value is not a JSON array of strings
    """
    if _blank(raw):
        return []
    try:
        value: Any = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidItemError("seasons", f"not valid JSON ({e.msg})", raw) from e
    if not isinstance(value, list) or not all(isinstance(s, str) for s in value):
        raise InvalidItemError("seasons", "expected a JSON array of strings", raw)
    return value


def parse_warmth(raw: Optional[str]) -> Optional[int]:
    """
    Coerce the warmth form field to an integer rating.

    Raises:
        InvalidItemError: If the value is not a whole number within 1-10
    """
    if _blank(raw):
        return None
    try:
        number = float(raw)
    except ValueError as e:
        raise InvalidItemError("warmth", "must be a number", raw) from e
    if not number.is_integer():
        raise InvalidItemError("warmth", "must be a whole number", raw)
    warmth = int(number)
    if not MIN_WARMTH <= warmth <= MAX_WARMTH:
        raise InvalidItemError("warmth", f"must be between {MIN_WARMTH} and {MAX_WARMTH}", raw)
    return warmth


class WardrobeService(IWardrobeService):
    """Item and dashboard operations scoped to the authenticated user."""

    def __init__(
        self,
        items: IItemRepository,
        users: IUserRepository,
        media: IMediaStorage,
        folder: str = DEFAULT_FOLDER,
    ):
        self._items = items
        self._users = users
        self._media = media
        self._folder = folder

    async def create_item(
        self,
        user_id: str,
        form: ItemForm,
        image: Optional[bytes],
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> Item:
        """
        Validate the form, upload the image, then store the item.

        If storing fails after the upload, the uploaded image is deleted
        and the original error is re-raised.
        """
        if _blank(form.name):
            raise InvalidItemError("name", "is required")
        if _blank(form.category):
            raise InvalidItemError("category", "is required")
        if not image:
            raise InvalidItemError("image", "an image file is required")

        seasons = parse_seasons(form.seasons)
        warmth = parse_warmth(form.warmth)

        reference = await self._media.upload(image, filename, content_type, self._folder)

        try:
            item = self._items.create(NewItem(
                user_id=user_id,
                name=form.name,
                image_url=reference.url,
                image_public_id=reference.public_id,
                category=form.category,
                sub_category=form.sub_category or None,
                seasons=seasons,
                color=form.color or None,
                warmth=warmth,
            ))
        except Exception:
            logger.warning(
                "Storing item for user %s failed; removing uploaded image %s",
                user_id,
                reference.public_id,
            )
            if not await self._media.delete(reference.public_id):
                logger.error("Could not remove orphaned image %s", reference.public_id)
            raise

        logger.info("Created item %s for user %s", item.id, user_id)
        return item

    async def list_items(self, user_id: str) -> list[Item]:
        return self._items.list_for_user(user_id)

    async def get_dashboard_stats(self, user_id: str) -> DashboardStats:
        user = self._users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        total_items = self._items.count_for_user(user_id)
        dirty_items = self._items.count_for_user(user_id, is_clean=False)

        return DashboardStats(
            name=user.full_name,
            total_items=total_items,
            dirty_items=dirty_items,
            is_new_user=total_items == 0,
        )
