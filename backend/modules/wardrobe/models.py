"""
Wardrobe module data models.

Stored rows use snake_case columns; API payloads use camelCase keys.
"""

from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


MIN_WARMTH = 1
MAX_WARMTH = 10


class CamelModel(BaseModel):
    """Base for models serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ItemForm(BaseModel):
    """Raw multipart form fields of an item upload, before validation."""

    name: Optional[str] = None
    category: Optional[str] = None
    sub_category: Optional[str] = None
    seasons: Optional[str] = None  # JSON-encoded array
    color: Optional[str] = None
    warmth: Optional[str] = None


class NewItem(BaseModel):
    """A validated item ready to be stored."""

    user_id: str
    name: str
    image_url: str
    image_public_id: Optional[str] = None
    category: str
    sub_category: Optional[str] = None
    seasons: list[str] = Field(default_factory=list)
    color: Optional[str] = None
    warmth: Optional[int] = Field(None, ge=MIN_WARMTH, le=MAX_WARMTH)
    is_clean: bool = True
    last_worn: Optional[datetime] = None


class Item(CamelModel):
    """A clothing item owned by one user."""

    id: str
    user_id: str
    name: str
    image_url: str
    image_public_id: Optional[str] = None
    category: str
    sub_category: Optional[str] = None
    seasons: list[str] = Field(default_factory=list)
    color: Optional[str] = None
    warmth: Optional[int] = Field(None, ge=MIN_WARMTH, le=MAX_WARMTH)
    is_clean: bool = True
    last_worn: Optional[datetime] = None
    created_at: Optional[datetime] = None


class Outfit(CamelModel):
    """
    A dated set of items worn together.

    Stored in the ``outfits`` table; no route reads or writes it yet.
    """

    id: str
    user_id: str
    worn_on: date = Field(..., alias="date")
    item_ids: list[str] = Field(default_factory=list)
    note: Optional[str] = None


class DashboardStats(CamelModel):
    """Summary shown on the dashboard."""

    name: str
    total_items: int
    dirty_items: int
    is_new_user: bool
