"""Refresh endpoint module.

Exchanges the refresh credential for a new access credential. The refresh
credential is read from its path-scoped cookie only, never from the body, so
clients that do not carry the cookie jar cannot replay it.

Transition:
- no refresh cookie -> 401 immediately, issuer not called, cookies untouched
- success           -> new access cookie set, refresh cookie untouched
- any failure       -> both cookies cleared on the 401 response; issuer
  outages are reported as an invalid refresh as well

A failed refresh means the whole credential set is untrustworthy. Leaving a
stale access cookie behind would let the client believe it is still signed in.
"""

import structlog
from fastapi import APIRouter, Request, Response, status

from src.adapters.api.v1.auth.cookies import mark_session_cookies_for_scrub, set_access_cookie
from src.adapters.api.v1.auth.schemas import RefreshResponse
from src.core.exceptions import AuthenticationError, InvalidRefreshTokenError, MissingRefreshTokenError
from src.core.logging import mask_token
from src.domain.value_objects.cookie_policy import REFRESH_TOKEN_COOKIE
from src.infrastructure.dependency_injection.auth_dependencies import (
    CleanCookiePolicy,
    CleanCredentialIssuer,
)

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=RefreshResponse,
    status_code=status.HTTP_200_OK,
    tags=["auth"],
    summary="Refresh the access token",
    description=(
        "Uses the refresh_token cookie to obtain a new access token. On failure both "
        "session cookies are cleared and the client must sign in again."
    ),
    responses={401: {"description": "Invalid refresh token. Must sign in again."}},
)
async def refresh_access_token(
    request: Request,
    response: Response,
    issuer: CleanCredentialIssuer,
    cookie_policy: CleanCookiePolicy,
) -> RefreshResponse:
    request_logger = logger.bind(
        correlation_id=getattr(request.state, "correlation_id", ""),
        endpoint="refresh",
        operation="token_refresh",
    )

    refresh_token = request.cookies.get(REFRESH_TOKEN_COOKIE)
    if not refresh_token:
        request_logger.info("Refresh attempted without refresh cookie")
        raise MissingRefreshTokenError()

    try:
        access_token = await issuer.refresh(refresh_token)
    except AuthenticationError as e:
        mark_session_cookies_for_scrub(request)
        request_logger.warning(
            "Refresh rejected - session cookies cleared",
            refresh_token=mask_token(refresh_token),
            error=e.code,
        )
        raise
    except Exception as e:
        mark_session_cookies_for_scrub(request)
        request_logger.error(
            "Refresh failed - unexpected error, session cookies cleared",
            refresh_token=mask_token(refresh_token),
            error_type=type(e).__name__,
            error=str(e),
        )
        raise InvalidRefreshTokenError() from e

    set_access_cookie(response, cookie_policy, access_token)
    request_logger.info("Access token refreshed", cookies_set=["access_token"])
    return RefreshResponse(access_token=access_token)
