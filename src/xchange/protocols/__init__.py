"""Raw exchange client protocols."""

from src.xchange.protocols.clients import RawAccountClient, RawMarketDataClient

__all__ = [
    "RawAccountClient",
    "RawMarketDataClient",
]
