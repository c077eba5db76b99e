from __future__ import annotations

"""/auth/register route module.

Registration business rules belong to the credential issuer. This route
forwards the payload and relays the issuer's result verbatim; an identity
collision surfaces as `UserAlreadyExistsError` (409). No cookies are issued:
a new account still has to log in.
"""

from typing import Any

import structlog
from fastapi import APIRouter, Request, status

from src.adapters.api.v1.auth.schemas import RegisterRequest
from src.core.exceptions import UserAlreadyExistsError
from src.infrastructure.dependency_injection.auth_dependencies import CleanCredentialIssuer

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    tags=["auth"],
    summary="Register a new user",
    description="Creates a new account through the credential issuer and returns its result.",
    responses={409: {"description": "Email already in use"}},
)
async def register_user(
    request: Request,
    payload: RegisterRequest,
    issuer: CleanCredentialIssuer,
) -> Any:
    request_logger = logger.bind(
        correlation_id=getattr(request.state, "correlation_id", ""),
        endpoint="register",
        operation="user_registration",
    )
    request_logger.info("Registration attempt initiated")

    try:
        result = await issuer.register(payload.model_dump(exclude_none=True))
    except UserAlreadyExistsError:
        request_logger.warning("Registration failed - identity already exists")
        raise

    request_logger.info("User registered successfully")
    return result
