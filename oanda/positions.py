"""Position endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from oanda.base import BaseClient, path_param
from schemas.http import Response


class PositionEndpoints(BaseClient):
    """/v3/accounts/{id}/positions routes."""

    def get_positions(self, account_id: str) -> Any:
        """Every position the account has ever held, open or not."""
        return self.make_get_request(f"/v3/accounts/{path_param(account_id)}/positions")

    def get_open_positions(self, account_id: str) -> Any:
        return self.make_get_request(f"/v3/accounts/{path_param(account_id)}/openPositions")

    def get_position(self, account_id: str, instrument: str) -> Any:
        return self.make_get_request(
            f"/v3/accounts/{path_param(account_id)}/positions/{path_param(instrument)}",
        )

    def close_position(
        self, account_id: str, instrument: str, body: Mapping[str, Any],
    ) -> Response:
        """Close out the long and/or short side, e.g. ``{"longUnits": "ALL"}``."""
        return self.make_patch_request(
            f"/v3/accounts/{path_param(account_id)}/positions/{path_param(instrument)}/close",
            body,
        )
