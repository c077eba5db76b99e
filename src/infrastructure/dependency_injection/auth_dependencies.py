"""Dependency providers for the session boundary's collaborators.

The application factory builds the credential issuer, the access guard and
the cookie policy once and stores them on ``app.state``. The factories below
hand those shared instances to route handlers through FastAPI's dependency
injection, so tests can swap any of them with ``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends, Request

from src.domain.interfaces import IAccessGuard, ICredentialIssuer
from src.domain.value_objects.cookie_policy import CookiePolicy


def get_credential_issuer(request: Request) -> ICredentialIssuer:
    """Factory that returns the application's :class:`ICredentialIssuer`."""
    return request.app.state.credential_issuer


def get_access_guard(request: Request) -> IAccessGuard:
    """Factory that returns the application's :class:`IAccessGuard`."""
    return request.app.state.access_guard


def get_cookie_policy(request: Request) -> CookiePolicy:
    """Factory that returns the process-wide :class:`CookiePolicy`."""
    return request.app.state.cookie_policy


# ---------------------------------------------------------------------------
# Convenience Aliases
# ---------------------------------------------------------------------------

CleanCredentialIssuer = Annotated[ICredentialIssuer, Depends(get_credential_issuer)]
CleanAccessGuard = Annotated[IAccessGuard, Depends(get_access_guard)]
CleanCookiePolicy = Annotated[CookiePolicy, Depends(get_cookie_policy)]
