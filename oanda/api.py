"""The OANDA v20 REST client."""

from __future__ import annotations

from oanda.accounts import AccountEndpoints
from oanda.instruments import InstrumentEndpoints
from oanda.orders import OrderEndpoints
from oanda.positions import PositionEndpoints
from oanda.pricing import PricingEndpoints
from oanda.trades import TradeEndpoints
from oanda.transactions import TransactionEndpoints


class APIClient(
    AccountEndpoints,
    OrderEndpoints,
    TradeEndpoints,
    PositionEndpoints,
    TransactionEndpoints,
    PricingEndpoints,
    InstrumentEndpoints,
):
    """One method per v20 REST endpoint.

    GET methods return the decoded JSON body (None when it is not valid
    JSON). POST and PATCH methods return the raw Response so the caller can
    inspect the status code and body. Nothing is validated, paginated or
    retried here: errors surface exactly as the transport reports them.

    Usage:
        client = APIClient(Environment.PRACTICE, "my-token")
        client.get_account_summary("101-004-1234567-001")
    """
