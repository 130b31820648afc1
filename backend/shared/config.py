"""
Centralized configuration for the StyleStash backend.

All settings are loaded from environment variables with sensible defaults.
Variables are prefixed with STYLESTASH_ (e.g., STYLESTASH_JWT_SECRET).
"""

from functools import lru_cache
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


DEFAULT_STATIC_DIR = Path(__file__).resolve().parent.parent / "public"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    The instance is frozen: it is built once at startup and handed to
    every component that needs it through the service container.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STYLESTASH_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Application
    app_name: str = "StyleStash API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = False
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    database_url: str = ""  # direct Postgres URL, migrations only

    # Tokens
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    token_ttl_days: int = 30

    # Passwords
    bcrypt_rounds: int = 10

    # Cloudinary
    cloudinary_cloud_name: str = ""
    cloudinary_api_key: str = ""
    cloudinary_api_secret: str = ""
    cloudinary_folder: str = "stylestash_uploads"
    allowed_image_formats: list[str] = ["jpg", "png", "jpeg", "webp"]

    # Front-end bundle served for unmatched routes
    static_dir: Path = DEFAULT_STATIC_DIR

    def missing_required(self) -> list[str]:
        """Return the names of required settings that are empty."""
        required = (
            "jwt_secret",
            "supabase_url",
            "supabase_service_role_key",
            "cloudinary_cloud_name",
            "cloudinary_api_key",
            "cloudinary_api_secret",
        )
        return [name for name in required if not getattr(self, name)]

    def ensure_required(self) -> None:
        """
        Fail fast when required configuration is absent.

        Raises:
            ConfigurationError: listing every missing setting
        """
        missing = self.missing_required()
        if missing:
            env_names = ", ".join(f"STYLESTASH_{name.upper()}" for name in missing)
            raise ConfigurationError(
                f"Missing required configuration: {env_names}",
                details={"missing": missing},
            )

    @property
    def cloudinary_configured(self) -> bool:
        return bool(
            self.cloudinary_cloud_name
            and self.cloudinary_api_key
            and self.cloudinary_api_secret
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
