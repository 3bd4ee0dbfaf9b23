"""
Order book domain models.

An order book is a snapshot of resting limit orders on both sides of a
market. Orders are kept in the sequence the exchange delivered them.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.xchange.enums import OrderType
from src.xchange.model.currency import CurrencyPair


class LimitOrder(BaseModel):
    """A resting order at a specific price and size."""

    type: OrderType
    original_amount: Decimal = Field(description="Order size in base currency")
    currency_pair: CurrencyPair
    id: str = ""
    timestamp: datetime | None = None
    limit_price: Decimal

    model_config = ConfigDict(frozen=True)


class OrderBook(BaseModel):
    """
    Order book snapshot.

    ``timestamp`` is when the snapshot was taken, which for exchanges that
    do not stamp their books is the time of conversion.
    """

    timestamp: datetime
    asks: list[LimitOrder] = Field(default_factory=list)
    bids: list[LimitOrder] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def best_bid(self) -> Decimal | None:
        """Get the first bid price."""
        return self.bids[0].limit_price if self.bids else None

    @property
    def best_ask(self) -> Decimal | None:
        """Get the first ask price."""
        return self.asks[0].limit_price if self.asks else None

    @property
    def spread(self) -> Decimal | None:
        """Get the spread."""
        if self.best_bid is None or self.best_ask is None:
            return None
        return self.best_ask - self.best_bid

    def get_total_size(self, side: OrderType) -> Decimal:
        """Get the total size resting on one side."""
        orders = self.bids if side == OrderType.BID else self.asks
        return Decimal(sum(order.original_amount for order in orders))
