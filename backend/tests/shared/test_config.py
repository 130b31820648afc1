"""Tests for shared/config.py."""

import pytest
from unittest.mock import patch
import os

from pydantic import ValidationError as PydanticValidationError

from shared.config import DEFAULT_STATIC_DIR, Settings, get_settings
from shared.exceptions import ConfigurationError


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        settings = Settings(_env_file=None)
        assert settings.app_name == "StyleStash API"
        assert settings.debug is False
        assert settings.port == 5000
        assert settings.host == "0.0.0.0"
        assert settings.token_ttl_days == 30
        assert settings.bcrypt_rounds == 10
        assert settings.jwt_algorithm == "HS256"
        assert settings.cloudinary_folder == "stylestash_uploads"
        assert settings.allowed_image_formats == ["jpg", "png", "jpeg", "webp"]
        assert settings.static_dir == DEFAULT_STATIC_DIR

    def test_loads_from_env(self):
        """Settings should load prefixed environment variables."""
        with patch.dict(os.environ, {"STYLESTASH_DEBUG": "true", "STYLESTASH_PORT": "9000"}):
            settings = Settings(_env_file=None)
            assert settings.debug is True
            assert settings.port == 9000

    def test_loads_secrets_from_env(self):
        """Settings should load secrets and service credentials from the environment."""
        with patch.dict(os.environ, {
            "STYLESTASH_JWT_SECRET": "env-secret",
            "STYLESTASH_SUPABASE_URL": "https://test.supabase.co",
            "STYLESTASH_CLOUDINARY_API_KEY": "cloud-key",
        }):
            settings = Settings(_env_file=None)
            assert settings.jwt_secret == "env-secret"
            assert settings.supabase_url == "https://test.supabase.co"
            assert settings.cloudinary_api_key == "cloud-key"

    def test_unprefixed_env_is_ignored(self):
        """Only STYLESTASH_ variables are read."""
        with patch.dict(os.environ, {"JWT_SECRET": "bare"}, clear=False):
            settings = Settings(_env_file=None)
            assert settings.jwt_secret != "bare"

    def test_settings_are_immutable(self, settings):
        """Settings cannot be changed after construction."""
        with pytest.raises(PydanticValidationError):
            settings.jwt_secret = "rotated"


class TestRequiredSettings:
    def test_missing_required_lists_empty_values(self):
        settings = Settings(_env_file=None, jwt_secret="s", supabase_url="https://x.supabase.co")
        missing = settings.missing_required()
        assert "jwt_secret" not in missing
        assert "supabase_url" not in missing
        assert "supabase_service_role_key" in missing
        assert "cloudinary_api_secret" in missing

    def test_ensure_required_passes_when_complete(self, settings):
        assert settings.missing_required() == []
        settings.ensure_required()

    def test_ensure_required_raises_with_env_names(self):
        settings = Settings(_env_file=None)
        with pytest.raises(ConfigurationError) as exc_info:
            settings.ensure_required()
        assert "STYLESTASH_JWT_SECRET" in exc_info.value.message
        assert "jwt_secret" in exc_info.value.details["missing"]

    def test_cloudinary_configured(self, settings):
        assert settings.cloudinary_configured is True
        assert Settings(_env_file=None).cloudinary_configured is False


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_caches(self):
        """get_settings should return cached instance."""
        get_settings.cache_clear()
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2
