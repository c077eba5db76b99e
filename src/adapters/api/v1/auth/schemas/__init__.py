from __future__ import annotations

"""Authentication API schemas package.

Request models live in ``requests``; response models in ``responses``. All
public symbols are re-exported so routes and tests import from
``src.adapters.api.v1.auth.schemas`` directly.
"""

# flake8: noqa: F401 – re-export

from .requests import LoginRequest, RegisterRequest
from .responses.token import RefreshResponse, TokensResponse

__all__ = [
    "LoginRequest",
    "RegisterRequest",
    "RefreshResponse",
    "TokensResponse",
]
