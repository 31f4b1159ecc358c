"""Transport backed by a shared requests.Session."""

from __future__ import annotations

import requests

from schemas.http import Request, Response


class RequestsTransport:
    """Sends requests through one reusable session. Implements Transport protocol.

    Non-2xx responses are returned as-is; connection errors and timeouts
    propagate as ``requests`` exceptions.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout

    def send(self, request: Request) -> Response:
        resp = self.session.request(
            request.method,
            request.url,
            headers=request.headers,
            data=request.body.encode("utf-8") if request.body is not None else None,
            timeout=self.timeout,
        )
        return Response(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            body=resp.text,
        )

    def close(self) -> None:
        self.session.close()
