"""
Abucoins to generic model adapters.

Pure functions that reshape Abucoins records into the exchange-agnostic
model. They keep input order, never sort, and hold no state between calls.
"""

from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from src.xchange.adapters.abucoins.data import (
    AbucoinsAccount,
    AbucoinsOrderBook,
    AbucoinsPriceLevel,
    AbucoinsTicker,
    AbucoinsTrade,
)
from src.xchange.adapters.abucoins.timestamps import parse_date
from src.xchange.enums import OrderType, TradeSortType
from src.xchange.exceptions import MissingTimestampError
from src.xchange.model.account import AccountInfo, Balance, Wallet
from src.xchange.model.book import LimitOrder, OrderBook
from src.xchange.model.currency import Currency, CurrencyPair
from src.xchange.model.ticker import Ticker
from src.xchange.model.trade import Trade, Trades


def _utc_now() -> datetime:
    return datetime.now(UTC)


def adapt_product_id(currency_pair: CurrencyPair) -> str:
    """Convert a pair to an Abucoins product id, e.g. BTC/USD -> BTC-USD."""
    return f"{currency_pair.base.code}-{currency_pair.counter.code}"


def adapt_trade(trade: AbucoinsTrade, currency_pair: CurrencyPair) -> Trade:
    """
    Adapt an Abucoins trade to a Trade.

    Args:
        trade: Abucoins trade
        currency_pair: Pair the trade was requested for

    Returns:
        The generic trade; its timestamp is None if the exchange sent an
        unparseable time

    """
    return Trade(
        type=OrderType.from_exchange(trade.side),
        original_amount=trade.size,
        currency_pair=currency_pair,
        price=trade.price,
        timestamp=parse_date(trade.time),
        id=trade.trade_id,
    )


def adapt_trades(
    trades: Sequence[AbucoinsTrade], currency_pair: CurrencyPair
) -> Trades:
    """
    Adapt a list of Abucoins trades.

    Input order is kept. The collection is labelled as timestamp-sorted
    because the exchange delivers trades in time order; nothing is re-sorted.
    """
    # TODO: derive last_id from the highest numeric trade id once paging
    # through trade history is supported.
    last_trade_id = 0
    return Trades(
        trades=[adapt_trade(trade, currency_pair) for trade in trades],
        last_id=last_trade_id,
        sort_type=TradeSortType.SORT_BY_TIMESTAMP,
    )


def adapt_ticker(ticker: AbucoinsTicker, currency_pair: CurrencyPair) -> Ticker:
    """
    Adapt an Abucoins ticker to a Ticker.

    Args:
        ticker: The exchange specific ticker
        currency_pair: The currency pair (e.g. BTC/USD)

    Returns:
        The ticker

    Raises:
        MissingTimestampError: If the ticker has no time or it cannot be parsed

    """
    if ticker.time is None:
        raise MissingTimestampError(f"Null date for: {ticker!r}")

    timestamp = parse_date(ticker.time)
    if timestamp is None:
        raise MissingTimestampError(
            f"Unparseable date {ticker.time!r} for: {ticker!r}"
        )

    return Ticker(
        currency_pair=currency_pair,
        last=ticker.price,
        bid=ticker.bid,
        ask=ticker.ask,
        volume=ticker.volume,
        timestamp=timestamp,
    )


def adapt_order_book(
    order_book: AbucoinsOrderBook,
    currency_pair: CurrencyPair,
    clock: Callable[[], datetime] = _utc_now,
) -> OrderBook:
    """
    Adapt an Abucoins order book to an OrderBook.

    Abucoins books carry no timestamp, so the snapshot is stamped with the
    time of conversion taken from ``clock``.
    """
    asks = create_orders(currency_pair, OrderType.ASK, order_book.asks)
    bids = create_orders(currency_pair, OrderType.BID, order_book.bids)
    return OrderBook(timestamp=clock(), asks=asks, bids=bids)


def adapt_account_info(accounts: Sequence[AbucoinsAccount]) -> AccountInfo:
    """Adapt Abucoins accounts to AccountInfo, one wallet per account."""
    return AccountInfo(
        username="",
        wallets=[adapt_wallet(account) for account in accounts],
    )


def adapt_wallet(account: AbucoinsAccount) -> Wallet:
    """
    Adapt one Abucoins account to a Wallet.

    Abucoins accounts are single-currency, so every wallet holds exactly
    one balance.
    """
    balance = Balance(
        currency=Currency.get_instance(account.currency),
        total=account.balance,
        available=account.available,
        frozen=account.hold,
    )
    return Wallet(id=account.id, name=str(account.profile_id), balances=[balance])


def create_orders(
    currency_pair: CurrencyPair,
    order_type: OrderType,
    orders: Sequence[AbucoinsPriceLevel] | None,
) -> list[LimitOrder]:
    """Convert one order book side; a missing side yields an empty list."""
    if orders is None:
        return []
    return [create_order(currency_pair, level, order_type) for level in orders]


def create_order(
    currency_pair: CurrencyPair,
    price_and_amount: AbucoinsPriceLevel,
    order_type: OrderType,
) -> LimitOrder:
    """Convert one price level to an anonymous, unstamped limit order."""
    return LimitOrder(
        type=order_type,
        original_amount=price_and_amount.size,
        currency_pair=currency_pair,
        id="",
        timestamp=None,
        limit_price=price_and_amount.price,
    )
