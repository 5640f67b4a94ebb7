"""Client configuration using pydantic-settings.

Environment variables are the sole source of truth. No secrets committed.
Use `get_settings()` to obtain the shared instance.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "https://api.twilio.com/2010-04-01"


class Settings(BaseSettings):
    # Provider
    TWILIO_BASE_URL: str = Field(DEFAULT_BASE_URL, description="Versioned REST root, without trailing slash")
    TWILIO_ACCOUNT_SID: Optional[str] = Field(None, description="Account SID (AC...) used in the resource path and as basic-auth user")
    TWILIO_AUTH_TOKEN: Optional[str] = Field(None, description="Auth token used as basic-auth password")

    # Transport
    TWILIO_HTTP_TIMEOUT: float = Field(30.0, gt=0, description="Per-request timeout in seconds handed to httpx")

    LOG_LEVEL: str = Field("INFO", description="Log level for structlog events")

    model_config = SettingsConfigDict(env_file=None, case_sensitive=False, extra="ignore")

    @property
    def base_url(self) -> str:
        return self.TWILIO_BASE_URL.rstrip("/")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton settings instance."""
    return Settings()


__all__ = ["Settings", "get_settings", "DEFAULT_BASE_URL"]
