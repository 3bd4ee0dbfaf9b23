"""Exchange services exposing the generic model."""

from src.xchange.service.account import AbucoinsAccountService
from src.xchange.service.market_data import AbucoinsMarketDataService

__all__ = ["AbucoinsAccountService", "AbucoinsMarketDataService"]
