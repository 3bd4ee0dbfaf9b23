"""Test helpers for Abucoins adapter tests."""

from collections.abc import Sequence
from typing import Any

from src.xchange.adapters.abucoins.data import (
    AbucoinsAccount,
    AbucoinsOrderBook,
    AbucoinsTicker,
    AbucoinsTrade,
)


class TradeBuilder:
    """Builder for creating test trades."""

    def __init__(self) -> None:
        """Initialize with sensible defaults."""
        self._data: dict[str, Any] = {
            "trade_id": "553794",
            "price": "14167.99",
            "size": "0.00035000",
            "side": "buy",
            "time": "2017-09-21T12:33:03Z",
        }

    def with_price(self, price: str | float) -> "TradeBuilder":
        """Set the trade price."""
        self._data["price"] = str(price)
        return self

    def with_size(self, size: str | float) -> "TradeBuilder":
        """Set the trade size."""
        self._data["size"] = str(size)
        return self

    def with_side(self, side: str) -> "TradeBuilder":
        """Set the trade side exactly as given."""
        self._data["side"] = side
        return self

    def with_time(self, time: str) -> "TradeBuilder":
        """Set the raw trade time."""
        self._data["time"] = time
        return self

    def with_id(self, trade_id: str | int) -> "TradeBuilder":
        """Set the trade ID."""
        self._data["trade_id"] = trade_id
        return self

    def build_json(self) -> dict[str, Any]:
        """Build as raw JSON data."""
        return dict(self._data)

    def build(self) -> AbucoinsTrade:
        """Build as AbucoinsTrade model."""
        return AbucoinsTrade.model_validate(self._data)


class TickerBuilder:
    """Builder for creating test tickers."""

    def __init__(self) -> None:
        """Initialize with sensible defaults."""
        self._data: dict[str, Any] = {
            "trade_id": "553612",
            "price": "14167.99",
            "size": "0.00079538",
            "bid": "14023.53",
            "ask": "14315.33",
            "volume": "1.00126153",
            "time": "2017-09-21T15:49:09Z",
        }

    def with_price(self, price: str | float) -> "TickerBuilder":
        """Set the last price."""
        self._data["price"] = str(price)
        return self

    def with_spread(self, bid: str | float, ask: str | float) -> "TickerBuilder":
        """Set bid and ask prices."""
        self._data["bid"] = str(bid)
        self._data["ask"] = str(ask)
        return self

    def with_time(self, time: str | None) -> "TickerBuilder":
        """Set the raw time, None removes it."""
        if time is None:
            self._data.pop("time", None)
        else:
            self._data["time"] = time
        return self

    def build_json(self) -> dict[str, Any]:
        """Build as raw JSON data."""
        return dict(self._data)

    def build(self) -> AbucoinsTicker:
        """Build as AbucoinsTicker model."""
        return AbucoinsTicker.model_validate(self._data)


class OrderBookBuilder:
    """Builder for creating test order books in the array wire form."""

    def __init__(self) -> None:
        """Initialize with empty sides."""
        self.asks: list[list[Any]] | None = []
        self.bids: list[list[Any]] | None = []
        self.sequence: int | None = None

    def with_ask(
        self, price: str, size: str, num_orders: int = 1
    ) -> "OrderBookBuilder":
        """Append an ask level."""
        if self.asks is None:
            self.asks = []
        self.asks.append([price, size, num_orders])
        return self

    def with_bid(
        self, price: str, size: str, num_orders: int = 1
    ) -> "OrderBookBuilder":
        """Append a bid level."""
        if self.bids is None:
            self.bids = []
        self.bids.append([price, size, num_orders])
        return self

    def without_asks(self) -> "OrderBookBuilder":
        """Send asks as null."""
        self.asks = None
        return self

    def without_bids(self) -> "OrderBookBuilder":
        """Send bids as null."""
        self.bids = None
        return self

    def build_json(self) -> dict[str, Any]:
        """Build as raw JSON data."""
        return {"asks": self.asks, "bids": self.bids, "sequence": self.sequence}

    def build(self) -> AbucoinsOrderBook:
        """Build as AbucoinsOrderBook model."""
        return AbucoinsOrderBook.model_validate(self.build_json())


def create_account(
    currency: str = "BTC",
    profile_id: int | str = 10502694,
    balance: str | float = "0.5",
    available: str | float = "0.4",
    hold: str | float = "0.1",
) -> AbucoinsAccount:
    """Create an Abucoins account as the accounts endpoint returns it."""
    return AbucoinsAccount.model_validate(
        {
            "id": f"{profile_id}-{currency}",
            "currency": currency,
            "balance": balance,
            "available": available,
            "hold": hold,
            "profile_id": profile_id,
        }
    )


class FakeAccountClient:
    """Raw account client returning canned accounts."""

    def __init__(self, accounts: Sequence[AbucoinsAccount]) -> None:
        """Initialize with the accounts to return."""
        self.accounts = list(accounts)
        self.calls = 0

    def get_abucoins_accounts(self) -> Sequence[AbucoinsAccount]:
        """Return the canned accounts."""
        self.calls += 1
        return self.accounts


class FakeMarketDataClient:
    """Raw market data client returning canned records per product."""

    def __init__(
        self,
        ticker: AbucoinsTicker | None = None,
        order_book: AbucoinsOrderBook | None = None,
        trades: Sequence[AbucoinsTrade] = (),
    ) -> None:
        """Initialize with the records to return."""
        self.ticker = ticker or TickerBuilder().build()
        self.order_book = order_book or OrderBookBuilder().build()
        self.trades = list(trades)
        self.requested: list[str] = []

    def get_abucoins_ticker(self, product_id: str) -> AbucoinsTicker:
        """Return the canned ticker."""
        self.requested.append(product_id)
        return self.ticker

    def get_abucoins_order_book(self, product_id: str) -> AbucoinsOrderBook:
        """Return the canned order book."""
        self.requested.append(product_id)
        return self.order_book

    def get_abucoins_trades(self, product_id: str) -> Sequence[AbucoinsTrade]:
        """Return the canned trades."""
        self.requested.append(product_id)
        return self.trades
