from __future__ import annotations

"""
Logout Route.

Logout is defined as "the client loses its credentials". The route asks the
credential issuer to revoke the session bound to the refresh cookie, but the
outcome of that call never changes the response: both cookies are cleared
and 200 is returned whether the revoke succeeds, fails, or there was no
refresh cookie at all.

A failed revoke is absorbed, not hidden: it is emitted as a structured
``logout_revoke_failed`` warning for monitoring.
"""

from fastapi import APIRouter, Request, Response, status
from structlog import get_logger

from src.adapters.api.v1.auth.cookies import clear_session_cookies
from src.core.logging import mask_token
from src.domain.value_objects.cookie_policy import REFRESH_TOKEN_COOKIE
from src.infrastructure.dependency_injection.auth_dependencies import (
    CleanCookiePolicy,
    CleanCredentialIssuer,
)

logger = get_logger(__name__)
router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    tags=["auth"],
    summary="Logout current user",
    description="Revokes the refresh token with the credential issuer and always clears both session cookies.",
    responses={200: {"description": "Session cookies cleared"}},
)
async def logout_user(
    request: Request,
    issuer: CleanCredentialIssuer,
    cookie_policy: CleanCookiePolicy,
) -> Response:
    """Revoke the current session and clear the session cookies.

    Returns:
        Response: Empty 200 response clearing ``access_token`` and ``refresh_token``.
    """
    correlation_id = getattr(request.state, "correlation_id", "")
    refresh_token = request.cookies.get(REFRESH_TOKEN_COOKIE)

    await logger.ainfo(
        "Logout request received",
        correlation_id=correlation_id,
        refresh_token=mask_token(refresh_token),
    )

    response = Response(status_code=status.HTTP_200_OK)
    try:
        await issuer.logout(refresh_token)
    except Exception as e:
        await logger.awarning(
            "logout_revoke_failed",
            correlation_id=correlation_id,
            error_type=type(e).__name__,
            error_message=str(e),
        )
    finally:
        clear_session_cookies(response, cookie_policy)

    await logger.ainfo("Logout request completed", correlation_id=correlation_id)
    return response
