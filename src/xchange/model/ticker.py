"""
Ticker domain model.

A ticker is a point-in-time summary of a market. Unlike trades, a ticker
always carries a timestamp.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.xchange.model.currency import CurrencyPair


class Ticker(BaseModel):
    """Market ticker for one currency pair."""

    currency_pair: CurrencyPair
    last: Decimal | None = Field(default=None, description="Last traded price")
    bid: Decimal | None = None
    ask: Decimal | None = None
    volume: Decimal | None = Field(default=None, ge=0)
    timestamp: datetime

    model_config = ConfigDict(frozen=True)

    @property
    def spread(self) -> Decimal | None:
        """Calculate bid-ask spread."""
        if self.bid is None or self.ask is None:
            return None
        return self.ask - self.bid

    @property
    def mid_price(self) -> Decimal | None:
        """Calculate mid price between bid and ask."""
        if self.bid is None or self.ask is None:
            return None
        return (self.bid + self.ask) / Decimal("2")

    def format_summary(self) -> str:
        """Format a human-readable summary."""
        parts = [f"{self.currency_pair}", f"Last: {self.last}"]
        if self.bid is not None and self.ask is not None:
            parts.append(f"Bid/Ask: {self.bid}/{self.ask}")
        if self.volume is not None:
            parts.append(f"Volume: {self.volume}")
        return " | ".join(parts)
