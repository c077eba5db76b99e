"""HTTP adapter for the upstream credential issuer.

The session boundary does not verify passwords, persist refresh tokens or talk
to Google itself. Those concerns belong to the credential issuer, reached here
over HTTP with a shared ``httpx.AsyncClient``. This module only translates
between the issuer's wire format and the domain's exceptions and value
objects.

Upstream status codes are mapped onto the session boundary's exception
hierarchy so route handlers can rely on typed errors:

- 401 on login / OAuth exchange   -> InvalidCredentialsError
- 401 / 403 on refresh            -> InvalidRefreshTokenError
- 409 on register                 -> UserAlreadyExistsError
- ``email_not_verified`` code     -> EmailNotVerifiedError
- anything else unexpected        -> CredentialIssuerError
"""

from typing import Any, Mapping, Optional

import httpx
import structlog

from src.core.exceptions import (
    CredentialIssuerError,
    EmailNotVerifiedError,
    InvalidCredentialsError,
    InvalidRefreshTokenError,
    UserAlreadyExistsError,
)
from src.core.logging import mask_token
from src.domain.interfaces.services import ICredentialIssuer
from src.domain.value_objects.token_pair import TokenPair

logger = structlog.get_logger(__name__)


class HttpCredentialIssuer(ICredentialIssuer):
    """Credential issuer reached over HTTP.

    Attributes:
        client (httpx.AsyncClient): Pooled client bound to the issuer base URL.
    """

    def __init__(self, base_url: str, timeout: float = 10.0, client: Optional[httpx.AsyncClient] = None):
        self.client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def aclose(self) -> None:
        await self.client.aclose()

    # ------------------------------------------------------------------
    # ICredentialIssuer
    # ------------------------------------------------------------------

    async def login(self, credentials: Mapping[str, Any]) -> TokenPair:
        response = await self._send("POST", "/login", json=dict(credentials))
        if response.status_code == 401:
            raise InvalidCredentialsError(self._detail(response, "Invalid credentials"))
        self._expect_success(response, "login")
        return self._token_pair(response, "login")

    async def register(self, data: Mapping[str, Any]) -> Any:
        response = await self._send("POST", "/register", json=dict(data))
        if response.status_code == 409:
            raise UserAlreadyExistsError(self._detail(response, "Email already in use"))
        self._expect_success(response, "register")
        return self._json(response, "register")

    async def refresh(self, refresh_token: str) -> str:
        response = await self._send("POST", "/refresh", json={"refreshToken": refresh_token})
        if response.status_code in (401, 403):
            await logger.ainfo(
                "Issuer rejected refresh token",
                refresh_token=mask_token(refresh_token),
                status_code=response.status_code,
            )
            raise InvalidRefreshTokenError()
        self._expect_success(response, "refresh")
        body = self._json(response, "refresh")
        access_token = body.get("accessToken") if isinstance(body, dict) else None
        if not access_token or not isinstance(access_token, str):
            raise CredentialIssuerError("Issuer returned no access token")
        return access_token

    async def logout(self, refresh_token: Optional[str]) -> None:
        response = await self._send("POST", "/logout", json={"refreshToken": refresh_token})
        self._expect_success(response, "logout")

    async def get_google_consent_url(self) -> str:
        response = await self._send("GET", "/google/consent-url")
        self._expect_success(response, "google_consent_url")
        body = self._json(response, "google_consent_url")
        url = body.get("url") if isinstance(body, dict) else None
        if not url or not isinstance(url, str):
            raise CredentialIssuerError("Issuer returned no consent URL")
        return url

    async def google_oauth(self, code: str) -> TokenPair:
        response = await self._send("POST", "/google/exchange", json={"code": code})
        if response.status_code in (401, 403):
            body = self._safe_json(response)
            if body.get("code") == "email_not_verified":
                raise EmailNotVerifiedError()
            raise InvalidCredentialsError(self._detail(response, "Invalid credentials"))
        self._expect_success(response, "google_oauth")
        return self._token_pair(response, "google_oauth")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            return await self.client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            await logger.aerror(
                "Credential issuer request failed",
                method=method,
                url=url,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise CredentialIssuerError() from e

    def _expect_success(self, response: httpx.Response, operation: str) -> None:
        if response.is_success:
            return
        logger.error(
            "Credential issuer returned unexpected status",
            operation=operation,
            status_code=response.status_code,
        )
        raise CredentialIssuerError(
            f"Credential issuer failed during {operation}",
            status_code=response.status_code,
        )

    def _token_pair(self, response: httpx.Response, operation: str) -> TokenPair:
        try:
            body = self._json(response, operation)
            if not isinstance(body, dict):
                raise ValueError("Token pair payload must be an object")
            return TokenPair.from_payload(body)
        except ValueError as e:
            logger.error("Credential issuer returned incomplete token pair", operation=operation)
            raise CredentialIssuerError("Issuer returned an incomplete token pair") from e

    def _json(self, response: httpx.Response, operation: str) -> Any:
        try:
            return response.json()
        except ValueError as e:
            logger.error("Credential issuer returned malformed JSON", operation=operation)
            raise CredentialIssuerError("Issuer returned a malformed response") from e

    @staticmethod
    def _safe_json(response: httpx.Response) -> Mapping[str, Any]:
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}

    def _detail(self, response: httpx.Response, default: str) -> str:
        message = self._safe_json(response).get("message")
        return message if isinstance(message, str) and message else default
