"""
FrogCrypto configuration.

This module provides configuration settings for the feed service
loaded from environment variables.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Find .env file in project root
_env_file = Path(__file__).parent.parent.parent.parent.parent / ".env"


class FrogCryptoConfig(BaseSettings):
    """
    FrogCrypto configuration from environment variables.

    All settings are prefixed with FROGCRYPTO_ in environment. List values
    are given as JSON, e.g. ``FROGCRYPTO_ADMIN_USER_IDS='["123", "456"]'``.
    """

    model_config = SettingsConfigDict(
        env_prefix="FROGCRYPTO_",
        env_file=str(_env_file) if _env_file.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Semaphore ids allowed to call the admin endpoints
    admin_user_ids: list[str] = Field(default_factory=list)

    # Base URL for reward image references
    server_url: str = "http://localhost:8000"

    # Feed cache
    feed_refresh_interval_seconds: int = Field(default=60, gt=0)

    # Scoreboard
    scoreboard_limit: int = Field(default=30, gt=0, le=1000)

    # Feed credentials (signed tokens carrying the user's semaphore id)
    credential_secret_key: str = "change-me-in-production"
    credential_algorithm: str = "HS256"
    credential_max_age_seconds: int = Field(default=3600, gt=0)

    # Operational error channel (webhook receiving unexpected failures)
    error_webhook_url: str | None = None


# Global instance
frogcrypto_config = FrogCryptoConfig()
