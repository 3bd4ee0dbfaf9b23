"""
Trade domain models.

These models represent executed trades independent of any specific exchange.
Exchange-specific trade formats are transformed into them at the adapter
boundary.
"""

from collections.abc import Iterator
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.xchange.enums import OrderType, TradeSortType
from src.xchange.model.currency import CurrencyPair


class Trade(BaseModel):
    """
    Domain model for a public market trade.

    The model is frozen for immutability and thread safety.
    """

    type: OrderType = Field(description="BID for a buy, ASK for a sell")
    original_amount: Decimal = Field(description="Trade size in base currency")
    currency_pair: CurrencyPair
    price: Decimal = Field(description="Executed trade price")
    timestamp: datetime | None = Field(
        default=None, description="Execution time, None if unparseable"
    )
    id: str = Field(default="", description="Trade identifier from exchange")

    model_config = ConfigDict(frozen=True)

    @property
    def value(self) -> Decimal:
        """Calculate trade value (price * amount)."""
        return self.price * self.original_amount

    @property
    def is_buy(self) -> bool:
        """Check if this is a buy trade."""
        return self.type == OrderType.BID


class Trades(BaseModel):
    """
    An ordered collection of trades.

    ``sort_type`` describes how the input was ordered; nothing here sorts.
    """

    trades: list[Trade] = Field(default_factory=list)
    last_id: int = 0
    sort_type: TradeSortType = TradeSortType.SORT_BY_ID

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        """Get the number of trades."""
        return len(self.trades)

    def __iter__(self) -> Iterator[Trade]:  # type: ignore[override]
        """Iterate trades in stored order."""
        return iter(self.trades)

    def __getitem__(self, index: int) -> Trade:
        """Get a trade by index."""
        return self.trades[index]
