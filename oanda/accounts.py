"""Account endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from oanda.base import BaseClient, path_param
from schemas.http import Response


class AccountEndpoints(BaseClient):
    """/v3/accounts routes."""

    def get_accounts(self) -> Any:
        """List the accounts the current token is authorized for."""
        return self.make_get_request("/v3/accounts")

    def get_account(self, account_id: str) -> Any:
        """Full account details, including open orders, trades and positions."""
        return self.make_get_request(f"/v3/accounts/{path_param(account_id)}")

    def get_account_summary(self, account_id: str) -> Any:
        return self.make_get_request(f"/v3/accounts/{path_param(account_id)}/summary")

    def get_account_instruments(
        self, account_id: str, data: Mapping[str, Any] | None = None,
    ) -> Any:
        """Tradeable instruments, optionally filtered with ``{"instruments": [...]}``."""
        return self.make_get_request(
            f"/v3/accounts/{path_param(account_id)}/instruments", data,
        )

    def update_account(self, account_id: str, body: Mapping[str, Any]) -> Response:
        """Set client-configurable properties such as ``alias`` or ``marginRate``."""
        return self.make_patch_request(
            f"/v3/accounts/{path_param(account_id)}/configuration", body,
        )

    def get_account_changes(self, account_id: str, transaction_id: str | int) -> Any:
        """State changes since ``transaction_id`` (used for polling)."""
        return self.make_get_request(
            f"/v3/accounts/{path_param(account_id)}/changes",
            {"sinceTransactionID": transaction_id},
        )
