"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations from the one
Settings instance loaded at startup.
"""

from datetime import timedelta
from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import IAuthService, ITokenService, IUserRepository
    from modules.media.interfaces import IMediaStorage
    from modules.wardrobe.interfaces import IItemRepository, IWardrobeService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings
        self._db: "Client | None" = None
        self._user_repository: "IUserRepository | None" = None
        self._item_repository: "IItemRepository | None" = None
        self._token_service: "ITokenService | None" = None
        self._media_storage: "IMediaStorage | None" = None
        self._auth_service: "IAuthService | None" = None
        self._wardrobe_service: "IWardrobeService | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def db(self) -> "Client":
        """Get the Supabase client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client(self.settings)
        return self._db

    @property
    def user_repository(self) -> "IUserRepository":
        if self._user_repository is None:
            from modules.auth.repository import SupabaseUserRepository
            self._user_repository = SupabaseUserRepository(self.db)
        return self._user_repository

    @property
    def item_repository(self) -> "IItemRepository":
        if self._item_repository is None:
            from modules.wardrobe.repository import SupabaseItemRepository
            self._item_repository = SupabaseItemRepository(self.db)
        return self._item_repository

    @property
    def tokens(self) -> "ITokenService":
        """Get the token service instance."""
        if self._token_service is None:
            from modules.auth.tokens import TokenService
            self._token_service = TokenService(
                secret=self.settings.jwt_secret,
                algorithm=self.settings.jwt_algorithm,
                ttl=timedelta(days=self.settings.token_ttl_days),
            )
        return self._token_service

    @property
    def media(self) -> "IMediaStorage":
        """Get the media storage instance."""
        if self._media_storage is None:
            from modules.media.service import CloudinaryMediaStorage
            self._media_storage = CloudinaryMediaStorage(self.settings)
        return self._media_storage

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.user_repository,
                tokens=self.tokens,
                bcrypt_rounds=self.settings.bcrypt_rounds,
            )
        return self._auth_service

    @property
    def wardrobe(self) -> "IWardrobeService":
        """Get the wardrobe service instance."""
        if self._wardrobe_service is None:
            from modules.wardrobe.service import WardrobeService
            self._wardrobe_service = WardrobeService(
                items=self.item_repository,
                users=self.user_repository,
                media=self.media,
                folder=self.settings.cloudinary_folder,
            )
        return self._wardrobe_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._db = None
        self._user_repository = None
        self._item_repository = None
        self._token_service = None
        self._media_storage = None
        self._auth_service = None
        self._wardrobe_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_wardrobe_service() -> "IWardrobeService":
    """FastAPI dependency for wardrobe service."""
    return get_container().wardrobe
