"""Request and response values exchanged with a Transport."""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

HttpMethod = Literal["GET", "POST", "PATCH"]


class Request(BaseModel):
    """A fully prepared HTTP request, built fresh for every call."""

    model_config = ConfigDict(frozen=True)

    method: HttpMethod = "GET"
    url: str
    headers: dict[str, str] = Field(default_factory=dict)
    body: str | None = None


class Response(BaseModel):
    """Raw HTTP response as returned by a Transport."""

    status_code: int
    headers: dict[str, str] = Field(default_factory=dict)
    body: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Decode the body, returning None when it is empty or not JSON."""
        if not self.body:
            return None
        try:
            return json.loads(self.body)
        except ValueError:
            return None

    def raise_for_status(self) -> Response:
        """Raise OandaHTTPError for non-2xx statuses, otherwise return self."""
        if not self.ok:
            from oanda.errors import OandaHTTPError

            raise OandaHTTPError.from_response(self)
        return self
