"""Opt-in retry decorator for any Transport, using tenacity."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import requests
from tenacity import (
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from observability.logger import get_logger

if TYPE_CHECKING:
    from tenacity import RetryCallState
    from tenacity.wait import wait_base

    from protocols.transport import Transport
    from schemas.http import Request, Response

log = get_logger(__name__)

# Raised before a connection exists, so the request never reached OANDA.
CONNECT_ERRORS: tuple[type[BaseException], ...] = (
    requests.ConnectTimeout,
    httpx.ConnectError,
    httpx.ConnectTimeout,
)

# May fire after OANDA has executed the request; only safe to repeat for GET.
READ_ERRORS: tuple[type[BaseException], ...] = (
    requests.ConnectionError,
    requests.Timeout,
    httpx.TransportError,
)


class RetryingTransport:
    """Wraps another transport and retries transport-level failures.

    Connect failures are retried for every verb. Failures that can happen
    after the request was sent are retried for GET only, so an order or
    close is never submitted twice. HTTP error statuses are responses, not
    failures, and are never retried.
    """

    def __init__(
        self,
        inner: Transport,
        attempts: int = 3,
        retry_on: tuple[type[BaseException], ...] = CONNECT_ERRORS,
        idempotent_retry_on: tuple[type[BaseException], ...] = READ_ERRORS,
        wait: wait_base | None = None,
    ) -> None:
        self.inner = inner
        self.attempts = max(1, attempts)
        self.retry_on = retry_on
        self.idempotent_retry_on = idempotent_retry_on
        self.wait = wait if wait is not None else wait_exponential(multiplier=0.5, min=0.5, max=5)

    def should_retry(self, request: Request, error: BaseException) -> bool:
        if isinstance(error, self.retry_on):
            return True
        return request.method == "GET" and isinstance(error, self.idempotent_retry_on)

    def send(self, request: Request) -> Response:
        retrying = Retrying(
            stop=stop_after_attempt(self.attempts),
            wait=self.wait,
            retry=retry_if_exception(lambda e: self.should_retry(request, e)),
            before_sleep=self._log_retry,
            reraise=True,
        )
        return retrying(self.inner.send, request)

    @staticmethod
    def _log_retry(state: RetryCallState) -> None:
        error = state.outcome.exception() if state.outcome else None
        log.warning(
            "oanda.transport.retry",
            attempt=state.attempt_number,
            error=str(error),
        )
