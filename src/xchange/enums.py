"""
Enums for the shared trading-data model.

This module defines the standardized enum values used by the generic model.
These enums are the vocabulary every exchange adapter translates into, so that
callers never see exchange-specific spellings.

"""

from __future__ import annotations

import enum

# =============================================================================
# MARKET STRUCTURE ENUMS
# =============================================================================


class Exchange(str, enum.Enum):
    """
    Supported exchange identifiers.

    Used to tag services and configuration with their data source.
    """

    ABUCOINS = "abucoins"


class OrderType(str, enum.Enum):
    """
    Side of an order or trade in the generic model.

    A trade is tagged with the side of the aggressor: BID for a buy,
    ASK for a sell. Limit orders use the side of the book they rest on.
    """

    BID = "bid"  # Buy side
    ASK = "ask"  # Sell side

    @classmethod
    def from_exchange(cls, side: str) -> OrderType:
        """
        Convert an Abucoins side string to an order type.

        Only the exact literal ``"buy"`` is a bid; every other value,
        including ``"BUY"`` and the empty string, maps to ASK.

        Args:
            side: Exchange side string

        Returns:
            OrderType.BID or OrderType.ASK

        """
        return cls.BID if side == "buy" else cls.ASK


class TradeSortType(str, enum.Enum):
    """
    How a trades collection claims to be ordered.

    This is a label describing the input, not an instruction to sort.
    """

    SORT_BY_ID = "sort_by_id"
    SORT_BY_TIMESTAMP = "sort_by_timestamp"


class FundingType(str, enum.Enum):
    """Direction of a funding record."""

    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
