"""
Raw exchange client protocols.

These protocols describe the low-level REST capabilities a service needs,
returning exchange-native records. Any object with matching methods
satisfies them; the HTTP transport and request signing live elsewhere.

Key design principles:
- Services compose a raw client instead of subclassing it
- Raw clients speak native records only, adapters do the translation
- Protocols are satisfied through structure, not inheritance
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from src.xchange.adapters.abucoins.data import (
    AbucoinsAccount,
    AbucoinsOrderBook,
    AbucoinsTicker,
    AbucoinsTrade,
)


@runtime_checkable
class RawAccountClient(Protocol):
    """
    Authenticated Abucoins account endpoints.

    Semantic Role: Source of native account records
    Relationships:
    - Consumed by: AbucoinsAccountService
    - Produces: AbucoinsAccount, one per currency
    """

    def get_abucoins_accounts(self) -> Sequence[AbucoinsAccount]:
        """
        Fetch all currency accounts of the authenticated profile.

        Returns:
            Accounts in the order the exchange returned them

        """
        ...


@runtime_checkable
class RawMarketDataClient(Protocol):
    """
    Public Abucoins market data endpoints.

    Semantic Role: Source of native market records
    Relationships:
    - Consumed by: AbucoinsMarketDataService
    - Keyed by: product id, e.g. "BTC-USD"
    """

    def get_abucoins_ticker(self, product_id: str) -> AbucoinsTicker:
        """Fetch the ticker of a product."""
        ...

    def get_abucoins_order_book(self, product_id: str) -> AbucoinsOrderBook:
        """Fetch the order book of a product."""
        ...

    def get_abucoins_trades(self, product_id: str) -> Sequence[AbucoinsTrade]:
        """Fetch recent trades of a product."""
        ...
