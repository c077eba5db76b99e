from __future__ import annotations

"""Request‐payload Pydantic models for authentication endpoints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

# ---------------------------------------------------------------------------
# Concrete request models ----------------------------------------------------
# ---------------------------------------------------------------------------


class LoginRequest(BaseModel):
    """Payload expected by ``POST /auth/login``."""

    email: EmailStr = Field(..., examples=["a@x.com"])
    password: str = Field(..., min_length=1, examples=["Str0ngP@ssw0rd"])


class RegisterRequest(BaseModel):
    """Payload expected by ``POST /auth/register``.

    Registration rules belong to the credential issuer; unknown fields are
    kept and forwarded as-is.
    """

    model_config = ConfigDict(extra="allow")

    email: EmailStr = Field(..., examples=["a@x.com"])
    password: str = Field(..., min_length=1, examples=["Str0ngP@ssw0rd"])
    name: Optional[str] = Field(default=None, examples=["Ada Lovelace"])
