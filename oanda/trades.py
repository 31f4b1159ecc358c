"""Trade endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from oanda.base import BaseClient, path_param
from schemas.http import Response


class TradeEndpoints(BaseClient):
    """/v3/accounts/{id}/trades routes."""

    def _trade_path(self, account_id: str, trade_specifier: str) -> str:
        return f"/v3/accounts/{path_param(account_id)}/trades/{path_param(trade_specifier)}"

    def get_trades(self, account_id: str, data: Mapping[str, Any] | None = None) -> Any:
        return self.make_get_request(f"/v3/accounts/{path_param(account_id)}/trades", data)

    def get_open_trades(self, account_id: str) -> Any:
        return self.make_get_request(f"/v3/accounts/{path_param(account_id)}/openTrades")

    def get_trade(self, account_id: str, trade_specifier: str) -> Any:
        return self.make_get_request(self._trade_path(account_id, trade_specifier))

    def close_trade(
        self,
        account_id: str,
        trade_specifier: str,
        body: Mapping[str, Any] | None = None,
    ) -> Response:
        """Close a trade fully, or partially with ``{"units": "100"}``."""
        return self.make_patch_request(
            f"{self._trade_path(account_id, trade_specifier)}/close", body,
        )

    def update_trade_client_extensions(
        self, account_id: str, trade_specifier: str, body: Mapping[str, Any],
    ) -> Response:
        return self.make_patch_request(
            f"{self._trade_path(account_id, trade_specifier)}/clientExtensions", body,
        )

    def update_trade_orders(
        self, account_id: str, trade_specifier: str, body: Mapping[str, Any],
    ) -> Response:
        """Create, replace or cancel the trade's take profit, stop loss and trailing stop."""
        return self.make_patch_request(
            f"{self._trade_path(account_id, trade_specifier)}/orders", body,
        )
