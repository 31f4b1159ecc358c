"""HTTP transport protocol — structural subtyping, no ABC needed."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from schemas.http import Request, Response


@runtime_checkable
class Transport(Protocol):
    """Any class that can send a prepared Request and return its Response."""

    def send(self, request: Request) -> Response:
        """Perform the network round trip. Non-2xx statuses are not errors."""
        ...
