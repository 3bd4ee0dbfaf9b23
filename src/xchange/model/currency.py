"""
Currency and currency pair models.

Currencies are identified by an upper-case code. Common codes resolve to a
canonical instance carrying a display name; unknown but well-formed codes
are accepted so that newly listed assets adapt without a code change.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator

_CODE_PATTERN = re.compile(r"^[A-Z0-9]{1,12}$")


class Currency(BaseModel):
    """A currency or asset, e.g. BTC or USD."""

    code: str = Field(description="Upper-case currency code")
    name: str = Field(default="", description="Human-readable name")

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("code", mode="before")
    @classmethod
    def validate_code(cls, v: str) -> str:
        """Normalize to upper case and reject malformed codes."""
        if not isinstance(v, str):
            raise ValueError(f"Currency code must be a string, got {type(v).__name__}")
        code = v.strip().upper()
        if not _CODE_PATTERN.match(code):
            raise ValueError(f"Invalid currency code: {v!r}")
        return code

    @classmethod
    def get_instance(cls, code: str) -> Currency:
        """
        Look up a currency by code.

        Args:
            code: Currency code in any case, e.g. "btc"

        Returns:
            The canonical instance for known codes, otherwise a new Currency

        Raises:
            ValueError: If the code is not 1-12 alphanumeric characters

        """
        currency = cls(code=code)
        return _KNOWN.get(currency.code, currency)

    def __eq__(self, other: object) -> bool:
        """Currencies are equal when their codes are."""
        if not isinstance(other, Currency):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash by code."""
        return hash(self.code)

    def __str__(self) -> str:
        """String representation."""
        return self.code


BTC = Currency(code="BTC", name="Bitcoin")
ETH = Currency(code="ETH", name="Ether")
LTC = Currency(code="LTC", name="Litecoin")
BCH = Currency(code="BCH", name="Bitcoin Cash")
ZEC = Currency(code="ZEC", name="Zcash")
XMR = Currency(code="XMR", name="Monero")
DASH = Currency(code="DASH", name="Dash")
ETC = Currency(code="ETC", name="Ether Classic")
USD = Currency(code="USD", name="US Dollar")
EUR = Currency(code="EUR", name="Euro")
PLN = Currency(code="PLN", name="Polish Zloty")

# Read-only, fixed at import.
_KNOWN: Mapping[str, Currency] = MappingProxyType(
    {c.code: c for c in (BTC, ETH, LTC, BCH, ZEC, XMR, DASH, ETC, USD, EUR, PLN)}
)


class CurrencyPair(BaseModel):
    """
    A tradable pair: amounts are in base, prices are in counter.

    ``CurrencyPair.parse("BTC/USD")`` and ``CurrencyPair.parse("BTC-USD")``
    are equivalent.
    """

    base: Currency
    counter: Currency

    model_config = ConfigDict(frozen=True)

    @classmethod
    def parse(cls, symbol: str) -> CurrencyPair:
        """Build a pair from a "BASE/COUNTER" or "BASE-COUNTER" symbol."""
        for separator in ("/", "-"):
            if separator in symbol:
                base, _, counter = symbol.partition(separator)
                return cls(
                    base=Currency.get_instance(base),
                    counter=Currency.get_instance(counter),
                )
        raise ValueError(f"Invalid currency pair: {symbol!r}")

    def __str__(self) -> str:
        """String representation."""
        return f"{self.base.code}/{self.counter.code}"


BTC_USD = CurrencyPair(base=BTC, counter=USD)
ETH_BTC = CurrencyPair(base=ETH, counter=BTC)
