from __future__ import annotations

"""Authentication router package – bundles the session lifecycle endpoints."""

from fastapi import APIRouter

from .routes import login as login_route
from .routes import logout as logout_route
from .routes import me as me_route
from .routes import oauth as oauth_route
from .routes import refresh as refresh_route
from .routes import register as register_route

router = APIRouter(prefix="/auth", tags=["auth"])

# Delegate to sub-routers ----------------------------------------------------

router.include_router(login_route.router, prefix="/login")
router.include_router(register_route.router, prefix="/register")
router.include_router(refresh_route.router, prefix="/refresh")
router.include_router(logout_route.router, prefix="/logout")
router.include_router(oauth_route.router, prefix="/google")
router.include_router(me_route.router)

__all__ = ["router"]
