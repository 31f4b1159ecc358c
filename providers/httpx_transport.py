"""Transport backed by a synchronous httpx.Client."""

from __future__ import annotations

import httpx

from schemas.http import Request, Response


class HttpxTransport:
    """Sends requests with httpx. Implements Transport protocol."""

    def __init__(
        self,
        client: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.client = client or httpx.Client(timeout=timeout)
        self.timeout = timeout

    def send(self, request: Request) -> Response:
        resp = self.client.request(
            request.method,
            request.url,
            headers=request.headers,
            content=request.body.encode("utf-8") if request.body is not None else None,
            timeout=self.timeout,
        )
        return Response(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            body=resp.text,
        )

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
