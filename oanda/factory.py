"""Build a ready-to-use APIClient from Settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from config.settings import Settings, get_settings
from oanda.api import APIClient
from observability.logger import get_logger
from schemas.client import ClientConfig

if TYPE_CHECKING:
    from observability.metrics import RequestMetrics
    from protocols.transport import Transport

log = get_logger(__name__)


def build_transport(settings: Settings) -> Transport:
    """Pick the HTTP backend, wrapped for retries when enabled."""
    transport: Transport
    if settings.http_backend == "httpx":
        from providers.httpx_transport import HttpxTransport

        transport = HttpxTransport(timeout=settings.request_timeout_seconds)
    else:
        from providers.requests_transport import RequestsTransport

        transport = RequestsTransport(timeout=settings.request_timeout_seconds)

    if settings.retries_enabled:
        from providers.retrying_transport import RetryingTransport

        transport = RetryingTransport(transport, attempts=settings.retry_attempts)
    return transport


def build_client(
    settings: Settings | None = None,
    *,
    metrics: RequestMetrics | None = None,
) -> APIClient:
    settings = settings or get_settings()
    client = APIClient(
        config=ClientConfig.from_settings(settings),
        transport=build_transport(settings),
        metrics=metrics,
    )
    log.info(
        "oanda.client.built",
        environment=settings.oanda_environment,
        backend=settings.http_backend,
        retry_attempts=settings.retry_attempts,
    )
    return client
