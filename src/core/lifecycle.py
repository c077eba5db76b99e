"""Application lifecycle management.

This module handles application startup and shutdown events, ensuring proper
initialization and cleanup of application resources.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.logging import logger


def create_lifespan_manager():
    """Create the application lifespan manager.

    Returns:
        AsyncContextManager: The lifespan manager for the FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager that handles startup and shutdown events.

        The cookie policy and collaborators are already attached to
        ``app.state`` by the application factory; startup only reports them.
        On shutdown the credential issuer's connection pool is closed when the
        factory created it.

        Args:
            app (FastAPI): The FastAPI application instance
        """
        settings = app.state.settings
        policy = app.state.cookie_policy
        logger.info(
            "application_startup",
            env=settings.NODE_ENV,
            version=settings.VERSION,
            api_url=settings.API_URL,
            secure_cookies=policy.access.secure,
            refresh_cookie_path=policy.refresh.path,
        )

        yield

        if getattr(app.state, "owns_credential_issuer", False):
            await app.state.credential_issuer.aclose()
        logger.info("application_shutdown", env=settings.NODE_ENV)

    return lifespan
