"""Exchange-agnostic trading data models."""

from src.xchange.model.account import AccountInfo, Balance, Wallet
from src.xchange.model.book import LimitOrder, OrderBook
from src.xchange.model.currency import Currency, CurrencyPair
from src.xchange.model.funding import (
    FundingRecord,
    TradeHistoryParams,
    WithdrawFundsParams,
)
from src.xchange.model.ticker import Ticker
from src.xchange.model.trade import Trade, Trades

__all__ = [
    "AccountInfo",
    "Balance",
    "Currency",
    "CurrencyPair",
    "FundingRecord",
    "LimitOrder",
    "OrderBook",
    "Ticker",
    "Trade",
    "TradeHistoryParams",
    "Trades",
    "Wallet",
    "WithdrawFundsParams",
]
