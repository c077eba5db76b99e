from __future__ import annotations

"""Identity probe routes.

``/auth/me`` exposes "who am I" for a request the access guard has already
validated. It performs no token lifecycle work.
"""

from typing import Annotated, Any, Dict, Mapping

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from src.core.dependencies.auth import get_current_identity

router = APIRouter()


@router.get(
    "/me",
    tags=["auth"],
    summary="Current identity",
    responses={401: {"description": "Missing or invalid access token"}},
)
async def get_me(identity: Annotated[Mapping[str, Any], Depends(get_current_identity)]) -> Dict[str, Any]:
    return dict(identity)


@router.get("/protected", response_class=PlainTextResponse, tags=["auth"])
async def get_hello() -> str:
    return "hello"
