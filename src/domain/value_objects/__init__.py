"""Domain Value Objects for the session boundary.

Value objects are immutable objects that describe domain concepts by their attributes
rather than their identity.
"""

from .cookie_policy import (
    ACCESS_TOKEN_COOKIE,
    REFRESH_TOKEN_COOKIE,
    CookieDescriptor,
    CookiePolicy,
)
from .token_pair import TokenPair

__all__ = [
    "ACCESS_TOKEN_COOKIE",
    "REFRESH_TOKEN_COOKIE",
    "CookieDescriptor",
    "CookiePolicy",
    "TokenPair",
]
