from __future__ import annotations

"""Cookie transport helpers for authentication routes.

These helpers are the only place where credential cookies are written or
removed. Setting always uses the policy's descriptors; clearing always uses
the same descriptors minus ``max_age`` so browsers actually drop the cookie.

Errors raised by a route are rendered by the global exception handlers on a
fresh response, so a route that must scrub cookies on failure marks the
request instead; the handlers then apply the clear to the error response.
"""

from fastapi import Request, Response

from src.domain.value_objects.cookie_policy import (
    ACCESS_TOKEN_COOKIE,
    REFRESH_TOKEN_COOKIE,
    CookiePolicy,
)
from src.domain.value_objects.token_pair import TokenPair

_SCRUB_FLAG = "scrub_session_cookies"


def set_access_cookie(response: Response, policy: CookiePolicy, access_token: str) -> None:
    response.set_cookie(ACCESS_TOKEN_COOKIE, access_token, **policy.access.set_kwargs())


def set_token_cookies(response: Response, policy: CookiePolicy, tokens: TokenPair) -> None:
    """Write both credential cookies for a freshly issued token pair."""
    set_access_cookie(response, policy, tokens.access_token)
    response.set_cookie(REFRESH_TOKEN_COOKIE, tokens.refresh_token, **policy.refresh.set_kwargs())


def clear_session_cookies(response: Response, policy: CookiePolicy) -> None:
    """Expire both credential cookies on the client."""
    response.delete_cookie(ACCESS_TOKEN_COOKIE, **policy.access.clear_kwargs())
    response.delete_cookie(REFRESH_TOKEN_COOKIE, **policy.refresh.clear_kwargs())


def mark_session_cookies_for_scrub(request: Request) -> None:
    """Ask the error handlers to clear both credential cookies on the error response."""
    setattr(request.state, _SCRUB_FLAG, True)


def apply_pending_scrub(request: Request, response: Response) -> None:
    """Clear both credential cookies if the request was marked for scrubbing."""
    if getattr(request.state, _SCRUB_FLAG, False):
        clear_session_cookies(response, request.app.state.cookie_policy)
