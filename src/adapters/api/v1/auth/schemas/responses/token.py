from __future__ import annotations

"""Response Pydantic models for token data.

Token values are serialized with camelCase keys (``accessToken`` /
``refreshToken``), the shape browser clients read programmatically.
"""

from pydantic import BaseModel, Field

from src.domain.value_objects.token_pair import TokenPair


class TokensResponse(BaseModel):
    """Access & refresh tokens, duplicated from the cookies set on the same response."""

    access_token: str = Field(serialization_alias="accessToken")
    refresh_token: str = Field(serialization_alias="refreshToken")

    @classmethod
    def from_pair(cls, tokens: TokenPair) -> "TokensResponse":
        return cls(access_token=tokens.access_token, refresh_token=tokens.refresh_token)


class RefreshResponse(BaseModel):
    """Freshly issued access token."""

    access_token: str = Field(serialization_alias="accessToken")
