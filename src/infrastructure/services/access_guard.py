"""JWT-based access guard.

Validates access credentials minted by the credential issuer and exposes the
claims they carry as the request identity. Only signature, expiry and the
optional audience/issuer claims are checked; the claim layout itself belongs
to the issuer.
"""

from typing import Any, Mapping, Optional

import jwt
from structlog import get_logger

from src.core.exceptions import AuthenticationError
from src.domain.interfaces.services import IAccessGuard

logger = get_logger(__name__)


class JwtAccessGuard(IAccessGuard):
    """Verifies HMAC/RSA signed JWT access credentials with PyJWT.

    An empty key makes the guard reject every credential instead of accepting
    unsigned tokens.
    """

    def __init__(
        self,
        key: str,
        algorithm: str = "HS256",
        audience: Optional[str] = None,
        issuer: Optional[str] = None,
    ):
        self._key = key
        self._algorithm = algorithm
        self._audience = audience or None
        self._issuer = issuer or None

    async def authenticate(self, access_token: str) -> Mapping[str, Any]:
        if not self._key:
            logger.warning("Access guard has no verification key configured")
            raise AuthenticationError("Unauthorized", code="access_guard_unconfigured")

        try:
            payload = jwt.decode(
                access_token,
                self._key,
                algorithms=[self._algorithm],
                audience=self._audience,
                issuer=self._issuer,
                options={"verify_aud": self._audience is not None},
            )
        except jwt.ExpiredSignatureError as e:
            logger.info("Expired access token presented")
            raise AuthenticationError("Access token expired", code="access_token_expired") from e
        except jwt.PyJWTError as e:
            logger.warning("JWT validation failed", error=str(e))
            raise AuthenticationError("Invalid access token", code="invalid_access_token") from e

        logger.debug("JWT validated", sub=payload.get("sub"))
        return payload
