"""Token Pair value object.

A `TokenPair` is the unit of issuance for login and the OAuth callback: an
access credential and a refresh credential produced together. Both values are
opaque strings whose structure belongs to the credential issuer.

The pair is all-or-nothing. Construction fails when either token is missing,
so a half-issued pair can never be written to cookies or response bodies.
"""

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class TokenPair:
    """Access & refresh credentials issued atomically."""

    access_token: str
    refresh_token: str

    def __post_init__(self):
        if not self.access_token or not isinstance(self.access_token, str):
            raise ValueError("Access token must be a non-empty string")
        if not self.refresh_token or not isinstance(self.refresh_token, str):
            raise ValueError("Refresh token must be a non-empty string")

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "TokenPair":
        """Build a pair from an issuer payload using camelCase keys.

        Raises:
            ValueError: If the payload lacks either token.
        """
        return cls(
            access_token=payload.get("accessToken"),
            refresh_token=payload.get("refreshToken"),
        )

    def __repr__(self) -> str:
        # Never leak credential values into logs or tracebacks.
        return "TokenPair(access_token=***, refresh_token=***)"
