"""Login endpoint module.

This module handles password login. The API layer is kept thin: credential
verification and token minting are delegated to the credential issuer, and
the route only moves the resulting token pair into cookies and the body.

Transition:
- success  -> access and refresh cookies set, same values returned in the body
- failure  -> issuer error propagates unchanged, no cookies touched
"""

import structlog
from fastapi import APIRouter, Request, Response, status

from src.adapters.api.v1.auth.cookies import set_token_cookies
from src.adapters.api.v1.auth.schemas import LoginRequest, TokensResponse
from src.core.exceptions import SessionGateError
from src.infrastructure.dependency_injection.auth_dependencies import (
    CleanCookiePolicy,
    CleanCredentialIssuer,
)

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=TokensResponse,
    status_code=status.HTTP_200_OK,
    tags=["auth"],
    summary="Authenticate a user",
    description=(
        "Verifies email and password with the credential issuer, sets the "
        "access_token and refresh_token cookies and returns the same tokens in the body."
    ),
    responses={401: {"description": "Invalid credentials"}},
)
async def login_user(
    request: Request,
    response: Response,
    payload: LoginRequest,
    issuer: CleanCredentialIssuer,
    cookie_policy: CleanCookiePolicy,
) -> TokensResponse:
    """Authenticate a user and issue a session.

    Args:
        request (Request): FastAPI request object for security context extraction
        response (Response): Sub-response carrying the Set-Cookie headers
        payload (LoginRequest): User credentials from request body
        issuer (ICredentialIssuer): Credential issuer
        cookie_policy (CookiePolicy): Process-wide cookie descriptors

    Returns:
        TokensResponse: The issued access and refresh tokens

    Raises:
        InvalidCredentialsError: If the issuer rejects the credentials
    """
    request_logger = logger.bind(
        correlation_id=getattr(request.state, "correlation_id", ""),
        endpoint="login",
        operation="user_authentication",
    )
    request_logger.info("Login attempt initiated", has_password=bool(payload.password))

    try:
        tokens = await issuer.login(payload.model_dump())
    except SessionGateError as e:
        request_logger.warning("Login failed", error=e.code)
        raise

    set_token_cookies(response, cookie_policy, tokens)
    request_logger.info("Session issued", cookies_set=["access_token", "refresh_token"])
    return TokensResponse.from_pair(tokens)
