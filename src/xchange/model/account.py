"""
Account domain models.

An account is a set of wallets, each holding balances per currency.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.xchange.model.currency import Currency


class Balance(BaseModel):
    """Funds held in one currency."""

    currency: Currency
    total: Decimal
    available: Decimal
    frozen: Decimal = Field(
        default=Decimal("0"), description="Funds on hold, e.g. for open orders"
    )

    model_config = ConfigDict(frozen=True)


class Wallet(BaseModel):
    """A currency-scoped container of balances."""

    id: str
    name: str = ""
    balances: list[Balance] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def get_balance(self, currency: Currency) -> Balance | None:
        """Get the balance for a currency, if this wallet holds it."""
        for balance in self.balances:
            if balance.currency == currency:
                return balance
        return None

    @property
    def currencies(self) -> list[Currency]:
        """Get the currencies held in this wallet."""
        return [balance.currency for balance in self.balances]


class AccountInfo(BaseModel):
    """All wallets of one exchange account."""

    username: str = ""
    wallets: list[Wallet] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def get_wallet(self, wallet_id: str) -> Wallet | None:
        """Get a wallet by id."""
        for wallet in self.wallets:
            if wallet.id == wallet_id:
                return wallet
        return None
