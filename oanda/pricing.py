"""Pricing endpoint."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from oanda.base import BaseClient, path_param


class PricingEndpoints(BaseClient):
    """/v3/accounts/{id}/pricing route."""

    def get_pricing(
        self,
        account_id: str,
        instruments: str | Sequence[str],
        data: Mapping[str, Any] | None = None,
    ) -> Any:
        """Current prices for ``instruments`` (a list or a CSV string)."""
        params: dict[str, Any] = dict(data or {})
        params["instruments"] = instruments if isinstance(instruments, str) else list(instruments)
        return self.make_get_request(f"/v3/accounts/{path_param(account_id)}/pricing", params)
