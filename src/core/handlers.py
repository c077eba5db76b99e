from __future__ import annotations

"""
Global exception handlers for the FastAPI application.

This module contains centralized handlers for custom application exceptions,
translating them into appropriate HTTP responses. Every handler honours the
cookie scrub mark left by the refresh route, so a failed refresh clears both
credential cookies whatever the error type.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette import status
from structlog import get_logger

from src.adapters.api.v1.auth.cookies import apply_pending_scrub
from src.core.exceptions import (
    AuthenticationError,
    CredentialIssuerError,
    SessionGateError,
    UserAlreadyExistsError,
)

__all__ = [
    "authentication_error_handler",
    "user_already_exists_error_handler",
    "credential_issuer_error_handler",
    "session_gate_error_handler",
    "register_exception_handlers",
]

logger = get_logger(__name__)


def _client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def _error_response(request: Request, status_code: int, detail: str, headers: dict | None = None) -> JSONResponse:
    response = JSONResponse(status_code=status_code, content={"detail": detail}, headers=headers)
    apply_pending_scrub(request, response)
    return response


async def authentication_error_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    """Handles `AuthenticationError`, returning a `401 Unauthorized`.

    This handler catches failed lifecycle transitions: invalid credentials,
    unverified OAuth emails, missing or rejected refresh credentials, and
    access guard rejections.

    Args:
        request: The incoming `Request` object.
        exc: The `AuthenticationError` instance.

    Returns:
        A `JSONResponse` with a 401 status code and error detail.
    """
    logger.warning(
        "Authentication failure",
        error=exc.code,
        client_ip=_client_ip(request),
        path=request.url.path,
        correlation_id=getattr(request.state, "correlation_id", ""),
    )
    return _error_response(
        request,
        status.HTTP_401_UNAUTHORIZED,
        str(exc),
        headers={"WWW-Authenticate": "Bearer"},
    )


async def user_already_exists_error_handler(request: Request, exc: UserAlreadyExistsError) -> JSONResponse:
    """Handles `UserAlreadyExistsError`, returning a `409 Conflict`.

    Args:
        request: The incoming `Request` object.
        exc: The `UserAlreadyExistsError` instance.

    Returns:
        A `JSONResponse` with a 409 status code and error detail.
    """
    return _error_response(request, status.HTTP_409_CONFLICT, exc.message)


async def credential_issuer_error_handler(request: Request, exc: CredentialIssuerError) -> JSONResponse:
    """Handles `CredentialIssuerError`, returning a `502 Bad Gateway`.

    The upstream issuer was unreachable or answered unexpectedly. Details
    stay in the logs.
    """
    logger.error(
        "Credential issuer interaction failed",
        error_code=exc.code,
        error_message=exc.message,
        upstream_status=exc.status_code,
        path=request.url.path,
    )
    return _error_response(request, status.HTTP_502_BAD_GATEWAY, "Credential issuer unavailable.")


async def session_gate_error_handler(request: Request, exc: SessionGateError) -> JSONResponse:
    """Handles the base `SessionGateError`, returning a `500 Internal Server Error`.

    This serves as a fallback for any custom application errors that do not
    have a more specific handler.
    """
    logger.error(
        "An unhandled application error occurred",
        error_code=exc.code,
        error_message=exc.message,
        path=request.url.path,
    )
    return _error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred.")


def register_exception_handlers(app: FastAPI) -> None:
    """Registers all custom exception handlers with the FastAPI application.

    Starlette resolves handlers along the exception's MRO, so the base
    `SessionGateError` handler only receives errors without a more specific one.

    Args:
        app: The `FastAPI` application instance.
    """
    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(UserAlreadyExistsError, user_already_exists_error_handler)
    app.add_exception_handler(CredentialIssuerError, credential_issuer_error_handler)
    app.add_exception_handler(SessionGateError, session_gate_error_handler)
