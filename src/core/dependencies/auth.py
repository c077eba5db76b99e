from __future__ import annotations

# FastAPI & typing
from typing import Annotated, Any, Mapping, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Project imports
from src.core.exceptions import AuthenticationError
from src.domain.value_objects.cookie_policy import ACCESS_TOKEN_COOKIE
from src.infrastructure.dependency_injection.auth_dependencies import CleanAccessGuard

__all__ = [
    "get_current_identity",
]


# ---------------------------------------------------------------------------
# Type-annotated dependency shortcuts
# ---------------------------------------------------------------------------


BearerCredentials = Annotated[
    Optional[HTTPAuthorizationCredentials], Depends(HTTPBearer(auto_error=False))
]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _extract_access_token(request: Request, bearer: Optional[HTTPAuthorizationCredentials]) -> Optional[str]:  # noqa: D401
    """Access credential from the cookie jar, falling back to the ``Authorization`` header."""
    token = request.cookies.get(ACCESS_TOKEN_COOKIE)
    if token:
        return token
    if bearer is not None and bearer.credentials:
        return bearer.credentials
    return None


# ---------------------------------------------------------------------------
# Public dependencies
# ---------------------------------------------------------------------------


async def get_current_identity(  # noqa: D401
    request: Request, bearer: BearerCredentials, guard: CleanAccessGuard
) -> Mapping[str, Any]:
    """Return the identity attached to a validated access credential.

    This is the request-preprocessing stage in front of guarded routes: it
    either enriches ``request.state.identity`` or rejects the request with
    :class:`AuthenticationError` (401). It performs no token lifecycle work.
    """

    token = _extract_access_token(request, bearer)
    if token is None:
        raise AuthenticationError("Unauthorized", code="missing_access_token")

    identity = await guard.authenticate(token)
    request.state.identity = identity
    return identity
