"""Request building and dispatch shared by every endpoint group."""

from __future__ import annotations

import json
import time
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qsl, quote, urlencode, urlsplit

from observability.logger import get_logger
from schemas.client import ClientConfig, DatetimeFormat, Environment
from schemas.http import HttpMethod, Request, Response
from schemas.observability import RequestRecord

if TYPE_CHECKING:
    from observability.metrics import RequestMetrics
    from protocols.transport import Transport

log = get_logger(__name__)


def path_param(value: object) -> str:
    """Encode one path segment, keeping ``@`` for client-tag specifiers."""
    return quote(str(value), safe="@")


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_query_value(v) for v in value)
    return str(value)


def build_query(params: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> str:
    """Encode query parameters the way the v20 API expects them.

    Accepts a mapping or a sequence of pairs (to keep repeated keys). None
    values are dropped, booleans are lowercase and sequences become comma
    separated lists.
    """
    items = params.items() if isinstance(params, Mapping) else params
    pairs = [(k, _query_value(v)) for k, v in items if v is not None]
    return urlencode(pairs)


def json_encode(data: Any) -> str:
    return json.dumps(data, separators=(",", ":"))


class BaseClient:
    """Holds configuration and turns endpoint calls into HTTP round trips.

    Configuration is an immutable ClientConfig; setters swap in an updated
    copy and return the client so they can be chained.
    """

    def __init__(
        self,
        environment: Environment | str | None = None,
        api_key: str | None = None,
        *,
        transport: Transport | None = None,
        config: ClientConfig | None = None,
        metrics: RequestMetrics | None = None,
    ) -> None:
        self._config = config if config is not None else ClientConfig()
        if environment is not None:
            self.set_environment(environment)
        if api_key is not None:
            self.set_api_key(api_key)

        # Only a transport built here is closed by close(); injected ones belong to the caller.
        self._owns_transport = transport is None
        if transport is None:
            from providers.requests_transport import RequestsTransport

            transport = RequestsTransport()
        self.transport = transport
        self.metrics = metrics

    def close(self) -> None:
        if self._owns_transport:
            self.transport.close()  # type: ignore[attr-defined]

    def __enter__(self) -> BaseClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # --- Configuration ---

    @property
    def config(self) -> ClientConfig:
        return self._config

    def get_environment(self) -> Environment | None:
        return self._config.environment

    def set_environment(self, environment: Environment | str | None) -> BaseClient:
        self._config = self._config.with_environment(environment)
        return self

    def get_api_key(self) -> str | None:
        key = self._config.api_key
        return key.get_secret_value() if key is not None else None

    def set_api_key(self, api_key: str | None) -> BaseClient:
        self._config = self._config.with_api_key(api_key)
        return self

    def set_accept_datetime_format(self, fmt: DatetimeFormat | None) -> BaseClient:
        self._config = self._config.with_accept_datetime_format(fmt)
        return self

    def base_uri(self) -> str:
        return self._config.base_url

    # --- Request assembly ---

    def absolute_endpoint(
        self,
        endpoint: str,
        data: Mapping[str, Any] | None = None,
        *,
        config: ClientConfig | None = None,
    ) -> str:
        """Resolve ``endpoint`` against the environment's base URL.

        Query parameters already on ``endpoint`` are kept in order, repeats
        included. A key also present in ``data`` is replaced, at its first
        position, by the single value from ``data``.
        """
        cfg = config if config is not None else self._config
        parts = urlsplit(endpoint)
        data = data or {}

        pairs: list[tuple[str, Any]] = []
        replaced: set[str] = set()
        for key, value in parse_qsl(parts.query, keep_blank_values=True):
            if key not in data:
                pairs.append((key, value))
            elif key not in replaced:
                pairs.append((key, data[key]))
                replaced.add(key)
        pairs.extend((k, v) for k, v in data.items() if k not in replaced)

        url = f"{cfg.base_url}/{parts.path.strip('/')}"
        query = build_query(pairs)
        return f"{url}?{query}" if query else url

    def prepare_request(
        self,
        endpoint: str,
        method: HttpMethod = "GET",
        data: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Request:
        """Build the Request for one call.

        GET folds ``data`` into the query string; other verbs send it as a
        JSON body. Authorization and Content-Type always override caller
        headers of the same name.
        """
        cfg = self._config
        mandatory = {
            "Authorization": cfg.bearer_token,
            "Content-Type": "application/json",
        }
        if cfg.accept_datetime_format:
            mandatory["Accept-Datetime-Format"] = cfg.accept_datetime_format

        reserved = {name.lower() for name in mandatory}
        merged = {k: v for k, v in (headers or {}).items() if k.lower() not in reserved}
        merged.update(mandatory)

        if method == "GET":
            url = self.absolute_endpoint(endpoint, data, config=cfg)
            body = None
        else:
            url = self.absolute_endpoint(endpoint, config=cfg)
            body = json_encode(data) if data is not None else None

        return Request(method=method, url=url, headers=merged, body=body)

    # --- Dispatch ---

    def send_request(self, request: Request) -> Response:
        """Send through the transport and return the raw response."""
        path = urlsplit(request.url).path
        env = (self._config.environment or Environment.PRACTICE).value
        start = time.perf_counter()

        try:
            response = self.transport.send(request)
        except Exception as e:
            latency_ms = round((time.perf_counter() - start) * 1000, 2)
            log.error(
                "oanda.request.failed",
                method=request.method,
                path=path,
                environment=env,
                latency_ms=latency_ms,
                error=str(e),
            )
            self._record(RequestRecord(
                method=request.method,
                path=path,
                environment=env,
                latency_ms=latency_ms,
                success=False,
                error_message=str(e),
            ))
            raise

        latency_ms = round((time.perf_counter() - start) * 1000, 2)
        log.info(
            "oanda.request.sent",
            method=request.method,
            path=path,
            environment=env,
            status_code=response.status_code,
            latency_ms=latency_ms,
        )
        self._record(RequestRecord(
            method=request.method,
            path=path,
            environment=env,
            status_code=response.status_code,
            latency_ms=latency_ms,
            success=response.ok,
        ))
        return response

    def _record(self, rec: RequestRecord) -> None:
        if self.metrics is not None:
            self.metrics.record(rec)

    def make_get_request(
        self,
        endpoint: str,
        data: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """GET ``endpoint`` and return the decoded JSON body (None if invalid)."""
        request = self.prepare_request(endpoint, "GET", data, headers)
        response = self.send_request(request)

        decoded = response.json()
        if decoded is None and response.body:
            log.warning(
                "oanda.response.invalid_json",
                path=urlsplit(request.url).path,
                status_code=response.status_code,
            )
        return decoded

    def make_post_request(
        self,
        endpoint: str,
        data: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        return self.send_request(self.prepare_request(endpoint, "POST", data, headers))

    def make_patch_request(
        self,
        endpoint: str,
        data: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        return self.send_request(self.prepare_request(endpoint, "PATCH", data, headers))
