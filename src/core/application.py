"""Application factory for creating and configuring the FastAPI application.

This module provides a factory function to create a properly configured FastAPI application
with all necessary middleware, exception handlers, and routers registered.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from src.adapters.api.v1 import api_router
from src.core.config.settings import Settings
from src.core.handlers import register_exception_handlers
from src.core.lifecycle import create_lifespan_manager
from src.core.middleware import configure_middleware
from src.domain.interfaces import IAccessGuard, ICredentialIssuer
from src.domain.value_objects.cookie_policy import CookiePolicy
from src.infrastructure.services import HttpCredentialIssuer, JwtAccessGuard


def create_application(
    settings: Optional[Settings] = None,
    credential_issuer: Optional[ICredentialIssuer] = None,
    access_guard: Optional[IAccessGuard] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This factory function creates a FastAPI application with all necessary
    configuration, middleware, exception handlers, and routers. The cookie
    policy is derived here, once per application, and fails fast on a
    missing or invalid setting.

    Args:
        settings: Settings to use, defaults to the process-wide singleton
        credential_issuer: Issuer implementation, defaults to the HTTP adapter
        access_guard: Access guard implementation, defaults to the JWT guard

    Returns:
        FastAPI: The configured FastAPI application instance
    """
    if settings is None:
        from src.core.config.settings import settings

    cookie_policy = CookiePolicy.from_settings(settings)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Session boundary: issues, renews and revokes credentials carried in cookies.",
        lifespan=create_lifespan_manager(),
        default_response_class=JSONResponse,
    )

    app.state.settings = settings
    app.state.cookie_policy = cookie_policy
    app.state.owns_credential_issuer = credential_issuer is None
    app.state.credential_issuer = credential_issuer or HttpCredentialIssuer(
        base_url=settings.ISSUER_BASE_URL,
        timeout=settings.ISSUER_TIMEOUT_SECONDS,
    )
    app.state.access_guard = access_guard or JwtAccessGuard(
        key=settings.JWT_SECRET_KEY.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
        audience=settings.JWT_AUDIENCE,
        issuer=settings.JWT_ISSUER,
    )

    # Configure middleware
    configure_middleware(app, settings.ALLOWED_ORIGINS)

    # Register exception handlers
    register_exception_handlers(app)

    # Include routers
    app.include_router(api_router, prefix=settings.API_URL)

    return app
