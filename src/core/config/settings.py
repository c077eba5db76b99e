"""Main application settings and configuration management.

This module composes the application settings from the different modules
(app, auth) into a single, accessible `Settings` class.

It loads settings from environment variables and .env files, validates them,
and provides a single `settings` object for use throughout the application.

Required keys (the process refuses to start without them):
- ACCESS_TOKEN_EXPIRES_IN
- REFRESH_TOKEN_EXPIRES_IN
- NODE_ENV
- API_URL
"""

import logging
import os
from pathlib import Path

from pydantic_settings import SettingsConfigDict

from .app import AppSettings
from .auth import AuthSettings

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "ACCESS_TOKEN_EXPIRES_IN",
    "REFRESH_TOKEN_EXPIRES_IN",
    "NODE_ENV",
    "API_URL",
)


class Settings(AppSettings, AuthSettings):
    """The main settings class that aggregates all application configurations.

    It inherits from all the specialized settings classes, providing a unified
    interface to all configuration parameters.

    Usage:
        - Access settings via the singleton instance `settings` throughout the application.
        - Tests build their own instances with explicit keyword arguments.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    def validate_required_fields(self) -> None:
        """Validates that all required environment variables are set.

        Pydantic already refuses to build a `Settings` without them; this check
        additionally rejects ``None`` values injected programmatically and logs
        the outcome for audit purposes. ``API_URL`` may legitimately be empty
        (routes mounted at the root).

        Raises:
            ValueError: If a required field is missing.
        """
        missing_fields = [field for field in REQUIRED_FIELDS if getattr(self, field, None) is None]
        if missing_fields:
            error_msg = f"Missing required environment variables: {', '.join(missing_fields)}"
            logger.error(error_msg)
            raise ValueError(error_msg)
        logger.info("All required environment variables are set.")


def create_settings() -> Settings:
    """Create settings instance with environment-specific configuration.

    The ``.env.<NODE_ENV>`` file is preferred when present, falling back to
    ``.env`` and then to the bare process environment.

    Returns:
        Settings: Configured settings instance

    Raises:
        ValueError: If a required key cannot be resolved.
    """
    env = os.getenv("NODE_ENV", "development")
    env_file = Path(f".env.{env}")

    if env_file.exists():
        logger.info(f"Loading environment configuration from {env_file}")
        settings_instance = Settings(_env_file=str(env_file))
    elif Path(".env").exists():
        logger.info(f"Loading environment configuration from .env (environment: {env})")
        settings_instance = Settings()
    else:
        logger.warning(f"No .env file found, using environment variables only (environment: {env})")
        settings_instance = Settings()

    settings_instance.validate_required_fields()
    logger.info(f"Application running in {settings_instance.NODE_ENV} environment")
    return settings_instance


# Create a singleton instance of the settings to be used across the application.
settings = create_settings()
