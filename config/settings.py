"""Environment-driven configuration using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """All configuration comes from environment variables / .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- OANDA ---
    oanda_api_key: SecretStr = SecretStr("")
    oanda_environment: Literal["practice", "live"] = "practice"
    oanda_account_id: str = ""
    oanda_datetime_format: Literal["RFC3339", "UNIX"] | None = None

    # --- HTTP ---
    http_backend: Literal["requests", "httpx"] = "requests"
    request_timeout_seconds: float = 10.0
    retry_attempts: int = 1

    # --- Observability ---
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("oanda_environment", mode="before")
    @classmethod
    def _lower_environment(cls, value: object) -> object:
        # Same spellings Environment.parse accepts: "LIVE", " Practice ".
        return value.strip().lower() if isinstance(value, str) else value

    @property
    def is_live(self) -> bool:
        return self.oanda_environment == "live"

    @property
    def retries_enabled(self) -> bool:
        return self.retry_attempts > 1


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
