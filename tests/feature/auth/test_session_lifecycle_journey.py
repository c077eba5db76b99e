"""
Feature tests for the complete session lifecycle.

The application runs with an in-memory credential issuer so the journeys go
through routing, cookie transport, error handlers and the client cookie jar
exactly as a browser would see them:
- Password login issues a session
- The refresh cookie renews the access cookie
- A rejected refresh signs the client out
- Logout always leaves the client without credentials
- An unverified Google identity never receives a session
"""

from typing import Any, Dict, Mapping, Optional

import pytest
from fastapi.testclient import TestClient

from src.core.application import create_application
from src.core.exceptions import (
    EmailNotVerifiedError,
    InvalidCredentialsError,
    InvalidRefreshTokenError,
    UserAlreadyExistsError,
)
from src.domain.interfaces import ICredentialIssuer
from src.domain.value_objects.token_pair import TokenPair
from src.infrastructure.services import JwtAccessGuard
from tests.utils.cookies import is_cleared, parse_set_cookies
from tests.utils.settings import TEST_JWT_SECRET, build_settings


class InMemoryCredentialIssuer(ICredentialIssuer):
    """Deterministic issuer: AT1/RT1 on login, AT2 on refresh of RT1."""

    def __init__(self):
        self.users: Dict[str, str] = {"a@x.com": "p"}
        self.live_refresh_tokens = set()
        self.revoked = []
        self.unverified_codes = {"abc"}

    async def login(self, credentials: Mapping[str, Any]) -> TokenPair:
        if self.users.get(credentials["email"]) != credentials["password"]:
            raise InvalidCredentialsError()
        self.live_refresh_tokens.add("RT1")
        return TokenPair(access_token="AT1", refresh_token="RT1")

    async def register(self, data: Mapping[str, Any]) -> Any:
        if data["email"] in self.users:
            raise UserAlreadyExistsError()
        self.users[data["email"]] = data["password"]
        return {"email": data["email"]}

    async def refresh(self, refresh_token: str) -> str:
        if refresh_token not in self.live_refresh_tokens:
            raise InvalidRefreshTokenError()
        return "AT2"

    async def logout(self, refresh_token: Optional[str]) -> None:
        self.revoked.append(refresh_token)
        self.live_refresh_tokens.discard(refresh_token)

    async def get_google_consent_url(self) -> str:
        return "https://accounts.google.com/o/oauth2/v2/auth?client_id=test"

    async def google_oauth(self, code: str) -> TokenPair:
        if code in self.unverified_codes:
            raise EmailNotVerifiedError()
        return TokenPair(access_token="AT-google", refresh_token="RT-google")


@pytest.fixture
def issuer():
    return InMemoryCredentialIssuer()


@pytest.fixture
def journey_client(issuer):
    app = create_application(
        settings=build_settings(),
        credential_issuer=issuer,
        access_guard=JwtAccessGuard(key=TEST_JWT_SECRET),
    )
    with TestClient(app) as client:
        yield client


class TestSessionLifecycleJourney:
    def test_login_then_refresh(self, journey_client):
        # Step 1: login
        response = journey_client.post("/api/auth/login", json={"email": "a@x.com", "password": "p"})

        assert response.status_code == 200
        assert response.json() == {"accessToken": "AT1", "refreshToken": "RT1"}
        cookies = parse_set_cookies(response)
        assert cookies["access_token"].value == "AT1"
        assert cookies["refresh_token"].value == "RT1"

        # Step 2: the jar sends RT1 to the refresh route only
        response = journey_client.post("/api/auth/refresh")

        assert response.status_code == 200
        assert response.json() == {"accessToken": "AT2"}
        cookies = parse_set_cookies(response)
        assert set(cookies) == {"access_token"}
        assert cookies["access_token"].value == "AT2"

    def test_rejected_refresh_signs_the_client_out(self, journey_client):
        journey_client.cookies.set("refresh_token", "bad")

        response = journey_client.post("/api/auth/refresh")

        assert response.status_code == 401
        cookies = parse_set_cookies(response)
        assert is_cleared(cookies["access_token"])
        assert is_cleared(cookies["refresh_token"])

    def test_logout_without_refresh_cookie(self, journey_client, issuer):
        response = journey_client.post("/api/auth/logout")

        assert response.status_code == 200
        assert issuer.revoked == [None]
        cookies = parse_set_cookies(response)
        assert is_cleared(cookies["access_token"])
        assert is_cleared(cookies["refresh_token"])

    def test_unverified_google_identity_gets_no_session(self, journey_client):
        response = journey_client.get("/api/auth/google/callback", params={"code": "abc"})

        assert response.status_code == 401
        assert response.json() == {"detail": "Email provided is not verified"}
        assert parse_set_cookies(response) == {}

    def test_google_sign_in(self, journey_client):
        response = journey_client.get("/api/auth/google", follow_redirects=False)
        assert response.status_code == 303

        response = journey_client.get("/api/auth/google/callback", params={"code": "valid"})

        assert response.status_code == 200
        assert response.json() == {"accessToken": "AT-google", "refreshToken": "RT-google"}

    def test_register_then_login(self, journey_client):
        response = journey_client.post("/api/auth/register", json={"email": "b@x.com", "password": "q"})
        assert response.status_code == 201
        assert parse_set_cookies(response) == {}

        response = journey_client.post("/api/auth/register", json={"email": "b@x.com", "password": "q"})
        assert response.status_code == 409

        response = journey_client.post("/api/auth/login", json={"email": "b@x.com", "password": "q"})
        assert response.status_code == 200
