"""Tests for the HTTP credential issuer adapter.

Upstream responses are served by ``httpx.MockTransport`` so the status and
payload mapping is exercised without a network.
"""

import json

import httpx
import pytest

from src.core.exceptions import (
    CredentialIssuerError,
    EmailNotVerifiedError,
    InvalidCredentialsError,
    InvalidRefreshTokenError,
    UserAlreadyExistsError,
)
from src.infrastructure.services import HttpCredentialIssuer

BASE_URL = "http://issuer.test/auth"


def make_issuer(handler) -> HttpCredentialIssuer:
    client = httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))
    return HttpCredentialIssuer(base_url=BASE_URL, client=client)


def respond(status_code: int, payload=None):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return handler


class TestLogin:
    @pytest.mark.asyncio
    async def test_success_returns_token_pair(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"accessToken": "AT1", "refreshToken": "RT1"})

        issuer = make_issuer(handler)

        pair = await issuer.login({"email": "a@example.com", "password": "pw"})

        assert (pair.access_token, pair.refresh_token) == ("AT1", "RT1")
        assert seen == {
            "method": "POST",
            "path": "/auth/login",
            "body": {"email": "a@example.com", "password": "pw"},
        }

    @pytest.mark.asyncio
    async def test_unauthorized_maps_to_invalid_credentials(self):
        issuer = make_issuer(respond(401, {"message": "Wrong email or password"}))

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await issuer.login({"email": "a@example.com", "password": "bad"})

        assert exc_info.value.message == "Wrong email or password"

    @pytest.mark.asyncio
    async def test_incomplete_pair_is_an_issuer_error(self):
        issuer = make_issuer(respond(200, {"accessToken": "AT1"}))

        with pytest.raises(CredentialIssuerError):
            await issuer.login({"email": "a@example.com", "password": "pw"})

    @pytest.mark.asyncio
    async def test_non_object_body_is_an_issuer_error(self):
        issuer = make_issuer(respond(200, ["AT1", "RT1"]))

        with pytest.raises(CredentialIssuerError):
            await issuer.login({"email": "a@example.com", "password": "pw"})

    @pytest.mark.asyncio
    async def test_unexpected_status_is_an_issuer_error(self):
        issuer = make_issuer(respond(500, {"message": "oops"}))

        with pytest.raises(CredentialIssuerError) as exc_info:
            await issuer.login({"email": "a@example.com", "password": "pw"})

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_transport_failure_is_an_issuer_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        issuer = make_issuer(handler)

        with pytest.raises(CredentialIssuerError):
            await issuer.login({"email": "a@example.com", "password": "pw"})


class TestRegister:
    @pytest.mark.asyncio
    async def test_result_is_relayed_verbatim(self):
        issuer = make_issuer(respond(201, {"id": 7, "email": "a@example.com"}))

        result = await issuer.register({"email": "a@example.com", "password": "pw"})

        assert result == {"id": 7, "email": "a@example.com"}

    @pytest.mark.asyncio
    async def test_conflict_maps_to_user_already_exists(self):
        issuer = make_issuer(respond(409, {"message": "Email already in use"}))

        with pytest.raises(UserAlreadyExistsError):
            await issuer.register({"email": "a@example.com", "password": "pw"})


class TestRefresh:
    @pytest.mark.asyncio
    async def test_sends_refresh_token_and_returns_access_token(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"accessToken": "AT2"})

        issuer = make_issuer(handler)

        assert await issuer.refresh("RT1") == "AT2"
        assert seen == {"path": "/auth/refresh", "body": {"refreshToken": "RT1"}}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [401, 403])
    async def test_rejection_maps_to_invalid_refresh_token(self, status_code):
        issuer = make_issuer(respond(status_code, {"message": "revoked"}))

        with pytest.raises(InvalidRefreshTokenError):
            await issuer.refresh("bad")

    @pytest.mark.asyncio
    async def test_missing_access_token_is_an_issuer_error(self):
        issuer = make_issuer(respond(200, {}))

        with pytest.raises(CredentialIssuerError):
            await issuer.refresh("RT1")


class TestLogout:
    @pytest.mark.asyncio
    async def test_revokes_refresh_token(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["body"] = json.loads(request.content)
            return httpx.Response(204)

        issuer = make_issuer(handler)

        await issuer.logout("RT1")

        assert seen["body"] == {"refreshToken": "RT1"}

    @pytest.mark.asyncio
    async def test_failure_is_an_issuer_error(self):
        issuer = make_issuer(respond(500))

        with pytest.raises(CredentialIssuerError):
            await issuer.logout(None)


class TestGoogle:
    @pytest.mark.asyncio
    async def test_consent_url(self):
        issuer = make_issuer(respond(200, {"url": "https://accounts.google.com/o/oauth2/v2/auth?x=1"}))

        assert await issuer.get_google_consent_url() == "https://accounts.google.com/o/oauth2/v2/auth?x=1"

    @pytest.mark.asyncio
    async def test_missing_consent_url_is_an_issuer_error(self):
        issuer = make_issuer(respond(200, {}))

        with pytest.raises(CredentialIssuerError):
            await issuer.get_google_consent_url()

    @pytest.mark.asyncio
    async def test_exchange_returns_token_pair(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"accessToken": "AT1", "refreshToken": "RT1"})

        issuer = make_issuer(handler)

        pair = await issuer.google_oauth("abc")

        assert pair.access_token == "AT1"
        assert seen == {"path": "/auth/google/exchange", "body": {"code": "abc"}}

    @pytest.mark.asyncio
    async def test_unverified_email(self):
        issuer = make_issuer(respond(401, {"code": "email_not_verified"}))

        with pytest.raises(EmailNotVerifiedError):
            await issuer.google_oauth("abc")

    @pytest.mark.asyncio
    async def test_other_rejection_is_invalid_credentials(self):
        issuer = make_issuer(respond(403, {"message": "Invalid grant"}))

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await issuer.google_oauth("abc")

        assert not isinstance(exc_info.value, EmailNotVerifiedError)


@pytest.mark.asyncio
async def test_aclose_closes_owned_client():
    issuer = make_issuer(respond(200))

    await issuer.aclose()

    assert issuer.client.is_closed
