"""
Application-specific settings.
"""
from typing import List, Union
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """
    Defines application-wide settings like project name, runtime environment,
    API prefix and CORS origins.

    Security Note:
        - ``NODE_ENV`` decides whether session cookies carry the ``Secure`` flag.
          Only the exact value ``production`` turns it on.
        - Ensure ALLOWED_ORIGINS is explicitly set to trusted domains in production,
          since the session cookies are sent with credentialed CORS requests
          (OWASP A05:2021 - Security Misconfiguration).
    """
    PROJECT_NAME: str = "sessiongate"
    VERSION: str = "0.1.0"
    NODE_ENV: str
    API_URL: str

    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    ALLOWED_ORIGINS: Union[str, List[str]] = Field(default="http://localhost:3000")

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """
        Splits a comma-separated string of origins into a list.

        Args:
            v: Input value as a string or list of origins.

        Returns:
            List of stripped origin strings.
        """
        if isinstance(v, str):
            return [i.strip() for i in v.split(",")]
        return v

    @field_validator("API_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        # "/api/" and "/api" must yield the same refresh cookie path
        return v.rstrip("/")

    @property
    def is_production(self) -> bool:
        return self.NODE_ENV == "production"
