from __future__ import annotations

"""Centralized, structured exception hierarchy for the session boundary.

This module defines the custom exceptions raised along the token lifecycle.
They carry a machine-readable `code` for programmatic error handling and a
human-readable `message` for logging and client feedback.

The hierarchy is designed to:
- Provide clear, specific errors for each failed lifecycle transition.
- Map cleanly to HTTP status codes in the API layer (see ``core.handlers``).
- Offer a consistent structure for logging and monitoring.
"""

from typing import Final

__all__: Final = [
    "SessionGateError",
    "AuthenticationError",
    "InvalidCredentialsError",
    "EmailNotVerifiedError",
    "InvalidRefreshTokenError",
    "MissingRefreshTokenError",
    "UserAlreadyExistsError",
    "CredentialIssuerError",
]


class SessionGateError(Exception):
    """Base exception class for all custom errors in the application.

    It enforces the presence of a `message` and a `code`, ensuring that all
    errors are structured and identifiable.

    Attributes:
        message (str): A human-readable error message, suitable for clients.
        code (str): A unique, machine-readable error code.
    """

    message: str
    code: str = "generic_error"

    def __init__(self, message: str, code: str = "generic_error"):
        self.message = message
        self.code = code
        Exception.__init__(self, self.message)

    # A concise, structured representation used by loggers & FastAPI handlers.
    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Auth-related errors (map to 401 Unauthorized)
# ---------------------------------------------------------------------------


class AuthenticationError(SessionGateError):
    """Raised for general authentication failures.

    This exception is the base for more specific authentication-related
    errors. It maps to a `401 Unauthorized` HTTP status code.
    """

    def __init__(self, message: str = "Unauthorized", code: str = "authentication_error"):
        super().__init__(message, code)


class InvalidCredentialsError(AuthenticationError):
    """Raised when login credentials or an OAuth identity are rejected.

    The message stays generic to prevent user enumeration.
    """

    def __init__(self, message: str = "Invalid credentials", code: str = "invalid_credentials"):
        super().__init__(message, code)


class EmailNotVerifiedError(AuthenticationError):
    """Raised when the identity resolved by the OAuth provider has an unverified email."""

    def __init__(
        self, message: str = "Email provided is not verified", code: str = "email_not_verified"
    ):
        super().__init__(message, code)


class InvalidRefreshTokenError(AuthenticationError):
    """Raised when a refresh credential is invalid, expired or revoked.

    The client's whole credential set is considered untrustworthy: both
    session cookies are cleared on the error response.
    """

    def __init__(
        self,
        message: str = "Invalid refresh token. Must sign in again.",
        code: str = "invalid_refresh_token",
    ):
        super().__init__(message, code)


class MissingRefreshTokenError(AuthenticationError):
    """Raised when a refresh is requested without a refresh cookie.

    No issuer call is attempted and no cookies are touched.
    """

    def __init__(
        self,
        message: str = "Invalid refresh token. Must sign in again.",
        code: str = "missing_refresh_token",
    ):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Conflict errors (map to 409 Conflict)
# ---------------------------------------------------------------------------


class UserAlreadyExistsError(SessionGateError):
    """Raised when registration collides with an existing identity."""

    def __init__(self, message: str = "Email already in use", code: str = "user_already_exists"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Upstream errors (map to 502 Bad Gateway)
# ---------------------------------------------------------------------------


class CredentialIssuerError(SessionGateError):
    """Raised when the credential issuer is unreachable or answers unexpectedly.

    Also raised when the issuer returns an incomplete token pair, so that a
    partial pair never reaches the transport layer.
    """

    def __init__(
        self,
        message: str = "Credential issuer unavailable",
        code: str = "credential_issuer_error",
        status_code: int | None = None,
    ):
        super().__init__(message, code)
        self.status_code = status_code
