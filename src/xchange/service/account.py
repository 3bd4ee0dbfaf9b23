"""
Abucoins account service.

Exposes the generic account contract on top of a raw Abucoins client.
Abucoins offers read-only account access through its API, so every
funding operation fails with a capability error.
"""

import logging
from decimal import Decimal

from src.xchange.adapters.abucoins.adapters import adapt_account_info
from src.xchange.exceptions import (
    NotAvailableFromExchangeError,
    NotYetImplementedForExchangeError,
)
from src.xchange.model.account import AccountInfo
from src.xchange.model.currency import Currency
from src.xchange.model.funding import (
    FundingRecord,
    TradeHistoryParams,
    WithdrawFundsParams,
)
from src.xchange.protocols.clients import RawAccountClient

logger = logging.getLogger(__name__)


class AbucoinsAccountService:
    """
    Account service for Abucoins.

    Holds a raw client rather than extending it so the adapters can be
    tested without any transport.
    """

    def __init__(self, raw: RawAccountClient) -> None:
        """
        Initialize the account service.

        Args:
            raw: Client for the authenticated account endpoints

        """
        self.raw = raw

    def get_account_info(self) -> AccountInfo:
        """Fetch all accounts and adapt them to one wallet each."""
        accounts = self.raw.get_abucoins_accounts()
        logger.debug(f"Adapting {len(accounts)} Abucoins accounts")
        return adapt_account_info(accounts)

    def request_deposit_address(self, currency: Currency, *arguments: str) -> str:
        """Deposit addresses are not exposed by the Abucoins API."""
        raise NotAvailableFromExchangeError()

    def withdraw_funds(self, params: WithdrawFundsParams) -> str:
        """Withdrawals are not exposed by the Abucoins API."""
        raise NotAvailableFromExchangeError()

    def withdraw_funds_to_address(
        self, currency: Currency, amount: Decimal, address: str
    ) -> str:
        """Withdrawals are not exposed by the Abucoins API."""
        raise NotAvailableFromExchangeError()

    def create_funding_history_params(self) -> TradeHistoryParams:
        """Funding history has no query parameters on Abucoins."""
        raise NotAvailableFromExchangeError()

    def get_funding_history(self, params: TradeHistoryParams) -> list[FundingRecord]:
        """Funding history is not wired up for Abucoins."""
        raise NotYetImplementedForExchangeError()
