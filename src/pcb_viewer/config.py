"""Configuration management using Pydantic Settings."""

import logging
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from .loader import EnvCredentialLookup, HttpFetcher, ResourceLoader
from .retry import RetryPolicy


class Settings(BaseSettings):
    """Viewer settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PCB_VIEWER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Backend
    base_url: str = "http://localhost:8080"
    api_endpoint: str = "/api/modules"

    # Retry
    max_attempts: int = 3
    attempt_timeout: float = 5.0
    base_delay: float = 1.0
    max_delay: float | None = None

    # Credentials
    auth_token_variable: str = "PCB_VIEWER_AUTH_TOKEN"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    def retry_policy(self) -> RetryPolicy:
        return RetryPolicy(
            max_attempts=self.max_attempts,
            attempt_timeout=self.attempt_timeout,
            base_delay=self.base_delay,
            max_delay=self.max_delay,
        )


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None


def configure_logging(level: str | None = None) -> None:
    """Send log records to stderr at the configured level."""
    logging.basicConfig(
        level=level or get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_loader(settings: Settings | None = None) -> ResourceLoader:
    """Wire an HTTP-backed loader from settings."""
    settings = settings or get_settings()
    return ResourceLoader(
        HttpFetcher(base_url=settings.base_url, api_endpoint=settings.api_endpoint),
        policy=settings.retry_policy(),
        credentials=EnvCredentialLookup(settings.auth_token_variable),
    )
