"""In-memory transport for tests and offline demos."""

from __future__ import annotations

import json
from collections import deque
from collections.abc import Iterable
from typing import Any

from schemas.http import Request, Response


def json_response(payload: Any, status_code: int = 200) -> Response:
    """Build a Response whose body is ``payload`` encoded as JSON."""
    return Response(
        status_code=status_code,
        headers={"Content-Type": "application/json"},
        body=json.dumps(payload),
    )


class RecordingTransport:
    """Records every request and replays queued responses. Implements Transport protocol.

    When the queue is empty it answers ``200 {}``. A queued exception is
    raised instead of returned, to simulate network failures.
    """

    def __init__(self, responses: Iterable[Response | BaseException] | None = None) -> None:
        self.requests: list[Request] = []
        self._queue: deque[Response | BaseException] = deque(responses or ())

    def queue(self, *responses: Response | BaseException) -> RecordingTransport:
        self._queue.extend(responses)
        return self

    def send(self, request: Request) -> Response:
        self.requests.append(request)
        if not self._queue:
            return json_response({})
        nxt = self._queue.popleft()
        if isinstance(nxt, BaseException):
            raise nxt
        return nxt

    @property
    def last(self) -> Request:
        if not self.requests:
            raise LookupError("no request has been sent")
        return self.requests[-1]
