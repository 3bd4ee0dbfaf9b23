"""Abucoins exchange adapter."""

from src.xchange.adapters.abucoins.adapters import (
    adapt_account_info,
    adapt_order_book,
    adapt_product_id,
    adapt_ticker,
    adapt_trade,
    adapt_trades,
    adapt_wallet,
    create_order,
    create_orders,
)
from src.xchange.adapters.abucoins.data import (
    AbucoinsAccount,
    AbucoinsOrderBook,
    AbucoinsPriceLevel,
    AbucoinsTicker,
    AbucoinsTrade,
)
from src.xchange.adapters.abucoins.timestamps import (
    TimestampParseResult,
    normalize_timestamp,
    parse_date,
    parse_timestamp,
)

__all__ = [
    "AbucoinsAccount",
    "AbucoinsOrderBook",
    "AbucoinsPriceLevel",
    "AbucoinsTicker",
    "AbucoinsTrade",
    "TimestampParseResult",
    "adapt_account_info",
    "adapt_order_book",
    "adapt_product_id",
    "adapt_ticker",
    "adapt_trade",
    "adapt_trades",
    "adapt_wallet",
    "create_order",
    "create_orders",
    "normalize_timestamp",
    "parse_date",
    "parse_timestamp",
]
