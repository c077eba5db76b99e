from __future__ import annotations

"""Re-export factory functions for generating fake test data."""

# flake8: noqa: F401 – re-export

from .token import create_fake_token_pair
from .user import create_fake_identity

__all__ = [
    "create_fake_identity",
    "create_fake_token_pair",
]
