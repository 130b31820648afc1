"""
Wardrobe module.

Per-user clothing items and dashboard statistics.

Public API:
- IWardrobeService: Interface for wardrobe operations
- WardrobeService: Implementation
- Item, DashboardStats, Outfit: Data models
"""

from .interfaces import IItemRepository, IWardrobeService
from .models import DashboardStats, Item, ItemForm, NewItem, Outfit
from .exceptions import InvalidItemError
from .service import WardrobeService, parse_seasons, parse_warmth

__all__ = [
    "IItemRepository",
    "IWardrobeService",
    "WardrobeService",
    "DashboardStats",
    "Item",
    "ItemForm",
    "NewItem",
    "Outfit",
    "InvalidItemError",
    "parse_seasons",
    "parse_warmth",
]
