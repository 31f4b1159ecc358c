"""Instrument endpoints: candles and order/position books."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from oanda.base import BaseClient, path_param


class InstrumentEndpoints(BaseClient):
    """/v3/instruments/{instrument} routes."""

    def get_instrument_candles(
        self, instrument: str, data: Mapping[str, Any] | None = None,
    ) -> Any:
        """Candlesticks; ``data`` takes ``granularity``, ``count``, ``from``, ``to``, ``price``..."""
        return self.make_get_request(f"/v3/instruments/{path_param(instrument)}/candles", data)

    def get_instrument_order_book(
        self, instrument: str, data: Mapping[str, Any] | None = None,
    ) -> Any:
        return self.make_get_request(f"/v3/instruments/{path_param(instrument)}/orderBook", data)

    def get_instrument_position_book(
        self, instrument: str, data: Mapping[str, Any] | None = None,
    ) -> Any:
        return self.make_get_request(
            f"/v3/instruments/{path_param(instrument)}/positionBook", data,
        )
