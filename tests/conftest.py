import os

# Required settings must resolve before any ``src`` module is imported: the
# settings singleton is created at import time and fails fast without them.
os.environ.setdefault("ACCESS_TOKEN_EXPIRES_IN", "900")
os.environ.setdefault("REFRESH_TOKEN_EXPIRES_IN", "604800")
os.environ.setdefault("NODE_ENV", "test")
os.environ.setdefault("API_URL", "/api")
os.environ.setdefault("LOG_JSON", "false")

from unittest.mock import AsyncMock

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from src.core.application import create_application
from src.domain.interfaces import ICredentialIssuer
from src.infrastructure.services import JwtAccessGuard
from tests.utils.settings import TEST_JWT_SECRET, build_settings


@pytest.fixture
def settings():
    return build_settings()


@pytest.fixture
def mock_issuer():
    """Credential issuer stub; every operation is an ``AsyncMock``."""
    return AsyncMock(spec=ICredentialIssuer)


@pytest.fixture
def access_guard() -> JwtAccessGuard:
    return JwtAccessGuard(key=TEST_JWT_SECRET)


@pytest.fixture
def app(settings, mock_issuer, access_guard):
    return create_application(
        settings=settings,
        credential_issuer=mock_issuer,
        access_guard=access_guard,
    )


@pytest.fixture
def cookie_policy(app):
    return app.state.cookie_policy


@pytest.fixture
def client(app):
    """Synchronous test client running the application lifespan."""
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def async_client(app):
    """Provides an async test client."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
