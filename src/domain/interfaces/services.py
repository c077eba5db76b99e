"""Service interfaces for the session boundary's collaborators.

These interfaces define contracts for the credential issuer and the access
guard, enabling dependency inversion and better testability. The route
handlers depend only on these abstractions; concrete adapters live in
``src.infrastructure.services``.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from src.domain.value_objects.token_pair import TokenPair


class ICredentialIssuer(ABC):
    """Interface for the authority that mints, validates and revokes credentials.

    The issuer owns the binding between refresh credentials and user
    identities. The session boundary never persists that binding; it only
    carries credential values between the issuer and the client.
    """

    @abstractmethod
    async def login(self, credentials: Mapping[str, Any]) -> TokenPair:
        """Verify credentials and mint a token pair.

        Args:
            credentials: Login payload (email and password).

        Returns:
            TokenPair: Freshly issued access and refresh credentials.

        Raises:
            InvalidCredentialsError: If the credentials are rejected.
        """
        pass

    @abstractmethod
    async def register(self, data: Mapping[str, Any]) -> Any:
        """Create an account.

        Args:
            data: Registration payload.

        Returns:
            The issuer's result, relayed verbatim to the client.

        Raises:
            UserAlreadyExistsError: If the identity already exists.
        """
        pass

    @abstractmethod
    async def refresh(self, refresh_token: str) -> str:
        """Exchange a refresh credential for a new access credential.

        Args:
            refresh_token: The refresh credential read from the cookie.

        Returns:
            str: The new access credential.

        Raises:
            InvalidRefreshTokenError: If the refresh credential is invalid,
                expired or revoked.
        """
        pass

    @abstractmethod
    async def logout(self, refresh_token: Optional[str]) -> None:
        """Revoke the session bound to a refresh credential.

        Args:
            refresh_token: The refresh credential, or ``None`` when the client
                presented none. Implementations treat ``None`` as a no-op.
        """
        pass

    @abstractmethod
    async def get_google_consent_url(self) -> str:
        """Build the Google consent screen URL the client is redirected to."""
        pass

    @abstractmethod
    async def google_oauth(self, code: str) -> TokenPair:
        """Exchange a Google authorization code and mint a token pair.

        Args:
            code: Authorization code from the provider callback.

        Returns:
            TokenPair: Freshly issued access and refresh credentials.

        Raises:
            EmailNotVerifiedError: If the resolved email is not verified.
            InvalidCredentialsError: If the exchange fails.
        """
        pass


class IAccessGuard(ABC):
    """Interface for request-time validation of an access credential."""

    @abstractmethod
    async def authenticate(self, access_token: str) -> Mapping[str, Any]:
        """Validate an access credential and return the identity it carries.

        Raises:
            AuthenticationError: If the credential is invalid or expired.
        """
        pass
