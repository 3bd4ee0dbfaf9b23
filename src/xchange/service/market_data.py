"""Abucoins market data service."""

import logging

from src.xchange.adapters.abucoins.adapters import (
    adapt_order_book,
    adapt_product_id,
    adapt_ticker,
    adapt_trades,
)
from src.xchange.model.book import OrderBook
from src.xchange.model.currency import CurrencyPair
from src.xchange.model.ticker import Ticker
from src.xchange.model.trade import Trades
from src.xchange.protocols.clients import RawMarketDataClient

logger = logging.getLogger(__name__)


class AbucoinsMarketDataService:
    """Generic market data calls backed by a raw Abucoins client."""

    def __init__(self, raw: RawMarketDataClient) -> None:
        """Initialize with the client for the public endpoints."""
        self.raw = raw

    def get_ticker(self, currency_pair: CurrencyPair) -> Ticker:
        """Fetch and adapt the ticker of a pair."""
        ticker = self.raw.get_abucoins_ticker(adapt_product_id(currency_pair))
        return adapt_ticker(ticker, currency_pair)

    def get_order_book(self, currency_pair: CurrencyPair) -> OrderBook:
        """Fetch and adapt the order book of a pair."""
        book = self.raw.get_abucoins_order_book(adapt_product_id(currency_pair))
        return adapt_order_book(book, currency_pair)

    def get_trades(self, currency_pair: CurrencyPair) -> Trades:
        """Fetch and adapt recent trades of a pair."""
        product_id = adapt_product_id(currency_pair)
        trades = self.raw.get_abucoins_trades(product_id)
        logger.debug(f"Adapting {len(trades)} trades for {product_id}")
        return adapt_trades(trades, currency_pair)
