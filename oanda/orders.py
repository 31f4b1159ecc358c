"""Order endpoints.

An order specifier is either the OANDA order ID or the client order ID
prefixed with ``@``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from oanda.base import BaseClient, path_param
from schemas.http import Response


class OrderEndpoints(BaseClient):
    """/v3/accounts/{id}/orders routes."""

    def _orders_path(self, account_id: str) -> str:
        return f"/v3/accounts/{path_param(account_id)}/orders"

    def create_order(self, account_id: str, body: Mapping[str, Any]) -> Response:
        """Submit ``{"order": {...}}``; the raw response carries fill or reject details."""
        return self.make_post_request(self._orders_path(account_id), body)

    def get_orders(self, account_id: str, data: Mapping[str, Any] | None = None) -> Any:
        """List orders, filtered by ``ids``, ``state``, ``instrument``, ``count``, ``beforeID``."""
        return self.make_get_request(self._orders_path(account_id), data)

    def get_pending_orders(self, account_id: str) -> Any:
        return self.make_get_request(f"/v3/accounts/{path_param(account_id)}/pendingOrders")

    def get_order(self, account_id: str, order_specifier: str) -> Any:
        return self.make_get_request(
            f"{self._orders_path(account_id)}/{path_param(order_specifier)}",
        )

    def update_order(
        self, account_id: str, order_specifier: str, body: Mapping[str, Any],
    ) -> Response:
        """Replace a pending order with the one in ``body``."""
        return self.make_patch_request(
            f"{self._orders_path(account_id)}/{path_param(order_specifier)}", body,
        )

    def cancel_pending_order(
        self, account_id: str, order_specifier: str, data: Mapping[str, Any] | None,
    ) -> Response:
        """Cancel a pending order. ``data`` is sent as the body; pass None for none."""
        return self.make_patch_request(
            f"{self._orders_path(account_id)}/{path_param(order_specifier)}/cancel", data,
        )

    def update_order_client_extensions(
        self, account_id: str, order_specifier: str, body: Mapping[str, Any],
    ) -> Response:
        return self.make_patch_request(
            f"{self._orders_path(account_id)}/{path_param(order_specifier)}/clientExtensions",
            body,
        )
