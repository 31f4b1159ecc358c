"""Client configuration schemas: target environment and credentials."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict, SecretStr

if TYPE_CHECKING:
    from config.settings import Settings

URL_LIVE = "https://api-fxtrade.oanda.com"
URL_PRACTICE = "https://api-fxpractice.oanda.com"

DatetimeFormat = Literal["RFC3339", "UNIX"]


class Environment(str, Enum):
    """Which OANDA deployment a client talks to."""

    LIVE = "live"
    PRACTICE = "practice"

    @property
    def base_url(self) -> str:
        return URL_LIVE if self is Environment.LIVE else URL_PRACTICE

    @classmethod
    def parse(cls, value: Environment | str) -> Environment:
        if isinstance(value, Environment):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown OANDA environment {value!r}, expected 'live' or 'practice'"
            ) from None


class ClientConfig(BaseModel):
    """Immutable connection settings for an APIClient.

    Use the ``with_*`` methods to derive a modified copy; the original is
    never changed, so a config can be shared between clients and threads.
    """

    model_config = ConfigDict(frozen=True)

    environment: Environment | None = None
    api_key: SecretStr | None = None
    accept_datetime_format: DatetimeFormat | None = None

    @property
    def base_url(self) -> str:
        if self.environment is Environment.LIVE:
            return URL_LIVE
        return URL_PRACTICE

    @property
    def bearer_token(self) -> str:
        key = self.api_key.get_secret_value() if self.api_key is not None else ""
        return f"Bearer {key}"

    def with_environment(self, environment: Environment | str | None) -> ClientConfig:
        env = Environment.parse(environment) if environment is not None else None
        return self.model_copy(update={"environment": env})

    def with_api_key(self, api_key: str | None) -> ClientConfig:
        key = SecretStr(api_key) if api_key is not None else None
        return self.model_copy(update={"api_key": key})

    def with_accept_datetime_format(self, fmt: DatetimeFormat | None) -> ClientConfig:
        return self.model_copy(update={"accept_datetime_format": fmt})

    @classmethod
    def from_settings(cls, settings: Settings) -> ClientConfig:
        key = settings.oanda_api_key.get_secret_value()
        return cls(
            environment=Environment.parse(settings.oanda_environment),
            api_key=SecretStr(key) if key else None,
            accept_datetime_format=settings.oanda_datetime_format,
        )
