import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ALLOWED_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration loaded from environment variables."""

    # --- Destination (not validated, a missing bucket fails at write time) ---
    bucket: str | None

    # --- Optional Variables with Defaults ---
    slack_token: str | None = field(repr=False)
    service_name: str
    environment: str
    log_level: str

    # --- Derived Properties ---
    @property
    def verify_token(self) -> bool:
        return bool(self.slack_token)

    @classmethod
    def load_from_env(cls) -> "AppConfig":
        """
        Loads configuration from environment variables, performing validation.
        Fails fast with a ConfigurationError if anything is invalid.
        """
        try:
            bucket = os.getenv("bucket") or None
            slack_token = os.getenv("SLACK_TOKEN") or None
            service_name = os.getenv("SERVICE_NAME", "slack-s3-writer")
            environment = os.getenv("ENVIRONMENT", "dev")

            # --- Handle special-case variables like log level ---
            log_level = os.getenv("LOG_LEVEL", "INFO").upper()
            if log_level not in ALLOWED_LOG_LEVELS:
                raise ValueError(
                    f"LOG_LEVEL must be one of {ALLOWED_LOG_LEVELS}, not '{log_level}'"
                )
        except (ValueError, TypeError) as e:
            raise ConfigurationError(
                f"Invalid value for an environment variable: {e}"
            ) from e

        if bucket is None:
            logger.warning(
                "Environment variable 'bucket' is not set; object writes will fail."
            )
        if slack_token is None:
            logger.info("SLACK_TOKEN is not set; request token verification is disabled.")

        return cls(
            bucket=bucket,
            slack_token=slack_token,
            service_name=service_name,
            environment=environment,
            log_level=log_level,
        )


# --- Singleton Factory Function (Lazy-loaded and Cached) ---
@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """
    Loads the application configuration from environment variables.
    The result is cached using lru_cache, so the environment is only read once
    on the first call. This avoids import-time side effects.
    """
    logger.info("Loading application configuration from environment...")
    return AppConfig.load_from_env()
