"""
Shared test fixtures and utilities.

Services are wired to in-memory repositories and media storage so the
HTTP layer can be exercised end to end without Supabase or Cloudinary.
"""

import asyncio
from datetime import datetime, timedelta, timezone

import jwt  # PyJWT
import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_auth_service, get_wardrobe_service, reset_container
from modules.auth.models import RegisterRequest
from modules.auth.repository import InMemoryUserRepository
from modules.auth.service import AuthService
from modules.auth.tokens import TokenService
from modules.media.service import InMemoryMediaStorage
from modules.wardrobe.repository import InMemoryItemRepository
from modules.wardrobe.service import WardrobeService
from shared.config import Settings, get_settings
from shared.database import reset_client_cache


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

# Lowest cost bcrypt accepts; keeps hashing fast in tests
TEST_BCRYPT_ROUNDS = 4

# Smallest valid PNG header is enough for the in-memory media storage
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


def create_test_token(
    user_id: str = "test-user-123",
    secret: str = TEST_JWT_SECRET,
    expired: bool = False,
) -> str:
    """
    Create a signed token the way TokenService does.

    Args:
        user_id: User ID to put in ``sub``
        secret: Signing secret
        expired: If True, creates a token that expired an hour ago
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(days=30)
    payload = {
        "sub": user_id,
        "iat": int((now - timedelta(days=31) if expired else now).timestamp()),
        "exp": int(exp.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached container, client and settings around each test."""
    reset_container()
    reset_client_cache()
    get_settings.cache_clear()
    yield
    reset_container()
    reset_client_cache()
    get_settings.cache_clear()


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Fully populated settings that never touch real services."""
    return Settings(
        jwt_secret=TEST_JWT_SECRET,
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="test-service-key",
        cloudinary_cloud_name="test-cloud",
        cloudinary_api_key="test-key",
        cloudinary_api_secret="test-secret",
        bcrypt_rounds=TEST_BCRYPT_ROUNDS,
        static_dir=tmp_path,
    )


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(TEST_JWT_SECRET)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def item_repository() -> InMemoryItemRepository:
    return InMemoryItemRepository()


@pytest.fixture
def media_storage() -> InMemoryMediaStorage:
    return InMemoryMediaStorage()


@pytest.fixture
def auth_service(user_repository, token_service) -> AuthService:
    return AuthService(user_repository, token_service, bcrypt_rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def wardrobe_service(item_repository, user_repository, media_storage) -> WardrobeService:
    return WardrobeService(item_repository, user_repository, media_storage, folder="test_uploads")


@pytest.fixture
def app(settings, auth_service, wardrobe_service):
    """Fresh app with services wired to in-memory stores."""
    app = create_app(settings)
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_wardrobe_service] = lambda: wardrobe_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


def _register(
    auth_service: AuthService,
    email: str = "ada@example.com",
    password: str = "s3cret-pass",
    first_name: str = "Ada",
    last_name: str = "Lovelace",
) -> str:
    """Register an account directly through the service and return its token."""
    response = asyncio.run(auth_service.register(RegisterRequest(
        first_name=first_name,
        last_name=last_name,
        email=email,
        password=password,
    )))
    return response.token


@pytest.fixture
def make_token():
    """Factory for hand-built tokens (see create_test_token)."""
    return create_test_token


@pytest.fixture
def register_user(auth_service):
    """
    Factory registering accounts through the auth service.

    Only for synchronous tests: it drives the coroutine with asyncio.run.
    """
    def register(**kwargs) -> str:
        return _register(auth_service, **kwargs)
    return register


@pytest.fixture
def auth_token(register_user) -> str:
    """Token of a freshly registered user."""
    return register_user()


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Headers carrying a valid token in the custom header."""
    return {"x-auth-token": auth_token}


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_BYTES
