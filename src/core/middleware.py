"""Middleware configuration for the FastAPI application.

This module handles the configuration and registration of all middleware
components including CORS and request correlation.
"""

import uuid

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

CORRELATION_ID_HEADER = "X-Correlation-ID"


def configure_middleware(app: FastAPI, allowed_origins: list) -> None:
    """Configure all middleware for the FastAPI application.

    Args:
        app (FastAPI): The FastAPI application instance
        allowed_origins (list): Origins allowed to make credentialed requests
    """
    # CORS middleware configuration; credentials are required for the cookie jar
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Correlation middleware
    app.middleware("http")(correlation_id_middleware)


async def correlation_id_middleware(request: Request, call_next):
    """Middleware assigning a correlation ID to every request.

    This middleware:
    1. Reuses the inbound ``X-Correlation-ID`` header or generates a new ID
    2. Stores it on ``request.state`` and in structlog's context variables
    3. Echoes it on the response

    Args:
        request (Request): The incoming request
        call_next: The next middleware or route handler

    Returns:
        Response: The response with the correlation header
    """
    correlation_id = request.headers.get(CORRELATION_ID_HEADER) or str(uuid.uuid4())
    request.state.correlation_id = correlation_id
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)
    response = await call_next(request)
    response.headers[CORRELATION_ID_HEADER] = correlation_id
    return response
