"""Google OAuth endpoint module.

Bridges the provider consent flow into the session model. No OAuth state is
held here: the credential issuer builds the consent URL and performs the
code exchange and identity resolution.

- ``GET /auth/google``           -> 303 redirect to the provider consent screen
- ``GET /auth/google/callback``  -> exchange the code, then the same cookie
  contract as password login
"""

import structlog
from fastapi import APIRouter, Query, Request, Response, status
from fastapi.responses import RedirectResponse

from src.adapters.api.v1.auth.cookies import set_token_cookies
from src.adapters.api.v1.auth.schemas import TokensResponse
from src.core.exceptions import SessionGateError
from src.infrastructure.dependency_injection.auth_dependencies import (
    CleanCookiePolicy,
    CleanCredentialIssuer,
)

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.get(
    "",
    status_code=status.HTTP_303_SEE_OTHER,
    response_class=RedirectResponse,
    tags=["auth"],
    summary="Redirect to the Google consent screen",
    description="Builds the Google consent URL and redirects to it with 303 See Other.",
    responses={303: {"description": "Redirect to the provider consent screen"}},
)
async def google_consent_screen(request: Request, issuer: CleanCredentialIssuer) -> RedirectResponse:
    url = await issuer.get_google_consent_url()
    logger.info(
        "Redirecting to Google consent screen",
        correlation_id=getattr(request.state, "correlation_id", ""),
    )
    return RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)


@router.get(
    "/callback",
    response_model=TokensResponse,
    status_code=status.HTTP_200_OK,
    tags=["auth"],
    summary="Complete Google sign-in",
    description=(
        "Exchanges the authorization code with the credential issuer, sets the "
        "access_token and refresh_token cookies and returns the same tokens in the body."
    ),
    responses={401: {"description": "Email provided is not verified"}},
)
async def google_callback(
    request: Request,
    response: Response,
    issuer: CleanCredentialIssuer,
    cookie_policy: CleanCookiePolicy,
    code: str = Query(..., min_length=1),
) -> TokensResponse:
    """Complete the OAuth flow and issue a session.

    Args:
        request (Request): FastAPI request object
        response (Response): Sub-response carrying the Set-Cookie headers
        issuer (ICredentialIssuer): Credential issuer performing the exchange
        cookie_policy (CookiePolicy): Process-wide cookie descriptors
        code (str): Authorization code from the provider

    Returns:
        TokensResponse: The issued access and refresh tokens

    Raises:
        EmailNotVerifiedError: If the resolved identity's email is not verified
        InvalidCredentialsError: If the exchange fails
    """
    request_logger = logger.bind(
        correlation_id=getattr(request.state, "correlation_id", ""),
        endpoint="google_callback",
        operation="oauth_authentication",
    )
    request_logger.info("OAuth callback received", has_code=bool(code))

    try:
        tokens = await issuer.google_oauth(code)
    except SessionGateError as e:
        request_logger.warning("OAuth authentication failed", error=e.code)
        raise

    set_token_cookies(response, cookie_policy, tokens)
    request_logger.info("Session issued via OAuth", cookies_set=["access_token", "refresh_token"])
    return TokensResponse.from_pair(tokens)
