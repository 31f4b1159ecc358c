"""Transaction history endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from oanda.base import BaseClient, path_param


class TransactionEndpoints(BaseClient):
    """/v3/accounts/{id}/transactions routes."""

    def _transactions_path(self, account_id: str) -> str:
        return f"/v3/accounts/{path_param(account_id)}/transactions"

    def get_transactions(
        self, account_id: str, data: Mapping[str, Any] | None = None,
    ) -> Any:
        """Paged listing: the response holds page URLs, not transactions."""
        return self.make_get_request(self._transactions_path(account_id), data)

    def get_transaction(self, account_id: str, transaction_id: str | int) -> Any:
        return self.make_get_request(
            f"{self._transactions_path(account_id)}/{path_param(transaction_id)}",
        )

    def get_transactions_range(
        self,
        account_id: str,
        from_id: str | int,
        to_id: str | int,
        data: Mapping[str, Any] | None = None,
    ) -> Any:
        """Transactions with IDs in ``[from_id, to_id]``; ``data`` may add a ``type`` filter."""
        params: dict[str, Any] = dict(data or {})
        params.update({"from": from_id, "to": to_id})
        return self.make_get_request(f"{self._transactions_path(account_id)}/idrange", params)

    def get_transactions_since(self, account_id: str, transaction_id: str | int) -> Any:
        return self.make_get_request(
            f"{self._transactions_path(account_id)}/sinceid",
            {"id": transaction_id},
        )
