"""Authentication and session settings.
"""

import logging

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class AuthSettings(BaseSettings):
    """Defines settings for the token lifecycle: cookie lifetimes, the upstream
    credential issuer, and the access guard's JWT verification parameters.

    Security Note:
        - The JWT verification key must never be logged or committed to version
          control (OWASP A02:2021 - Cryptographic Failures).
        - Cookie lifetimes are expressed in seconds and should not exceed the
          lifetime of the tokens minted by the issuer, otherwise browsers keep
          sending credentials the issuer already considers expired.
    """

    # Cookie lifetimes (seconds)
    ACCESS_TOKEN_EXPIRES_IN: int = Field(gt=0)
    REFRESH_TOKEN_EXPIRES_IN: int = Field(gt=0)

    # Upstream credential issuer
    ISSUER_BASE_URL: str = "http://localhost:3001/auth"
    ISSUER_TIMEOUT_SECONDS: float = Field(default=10.0, gt=0)

    # Access guard
    JWT_SECRET_KEY: SecretStr = SecretStr("")
    JWT_ALGORITHM: str = "HS256"
    JWT_AUDIENCE: str = ""
    JWT_ISSUER: str = ""

    @model_validator(mode="after")
    def _warn_on_missing_jwt_key(self) -> "AuthSettings":
        """Logs a warning when the access guard has no verification key.

        The service still starts: only ``/auth/me`` depends on the guard and it
        rejects every credential until a key is configured.
        """
        if not self.JWT_SECRET_KEY.get_secret_value():
            logger.warning(
                "JWT_SECRET_KEY is not set; the access guard will reject all credentials."
            )
        return self
