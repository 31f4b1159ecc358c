"""Errors raised by opt-in response checks."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from schemas.http import Response


class OandaError(Exception):
    """Base class for errors raised by this package."""


class OandaHTTPError(OandaError):
    """A non-2xx response from the OANDA v20 API."""

    def __init__(
        self,
        status_code: int,
        message: str = "",
        *,
        error_code: str | None = None,
        response: Response | None = None,
    ) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.error_message = message
        self.response = response
        text = f"HTTP {status_code}"
        if error_code:
            text += f" [{error_code}]"
        if message:
            text += f": {message}"
        super().__init__(text)

    @classmethod
    def from_response(cls, response: Response) -> OandaHTTPError:
        payload = response.json()
        if isinstance(payload, dict):
            message = str(payload.get("errorMessage", ""))
            code = payload.get("errorCode")
        else:
            message = response.body[:200]
            code = None
        return cls(
            response.status_code,
            message,
            error_code=str(code) if code is not None else None,
            response=response,
        )
