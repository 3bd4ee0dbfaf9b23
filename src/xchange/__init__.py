"""Exchange adapters for a shared, exchange-agnostic trading model."""

from src.xchange.model import AccountInfo, OrderBook, Ticker, Trades
from src.xchange.service import AbucoinsAccountService, AbucoinsMarketDataService

__all__ = [
    "AbucoinsAccountService",
    "AbucoinsMarketDataService",
    "AccountInfo",
    "OrderBook",
    "Ticker",
    "Trades",
]
