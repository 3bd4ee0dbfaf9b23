"""
Abucoins REST API Pydantic Models.

This module implements Pydantic models that parse Abucoins REST responses
and expose typed accessors for the adapters.

Key design principles:
- Pydantic models inherit ONLY from BaseModel
- Raw fields store exchange data as-is (with _raw suffix)
- Properties convert raw values to Decimal for the adapters
- Nothing here knows about the generic model
"""

from decimal import Decimal, InvalidOperation
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator


def _check_decimal(value: str | int | float) -> str | int | float:
    """Reject values that do not read as a finite decimal number."""
    try:
        number = Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Not a decimal number: {value!r}") from e
    if not number.is_finite():
        raise ValueError(f"Not a finite decimal number: {value!r}")
    return value


RawDecimal = Annotated[str | int | float, AfterValidator(_check_decimal)]


def _to_decimal(value: RawDecimal) -> Decimal:
    """Convert string or number to Decimal without float artifacts."""
    return Decimal(str(value))


def _to_optional_decimal(value: RawDecimal | None) -> Decimal | None:
    """Convert string or number to Decimal, handling None."""
    if value is None:
        return None
    return _to_decimal(value)


# Market Data Models
class AbucoinsTrade(BaseModel):
    """
    A public trade from ``GET /products/<product-id>/trades``.

    Example::

        {"time": "2017-09-21T12:33:03Z", "trade_id": "553794",
         "price": "14167.99", "size": "0.00035000", "side": "buy"}
    """

    trade_id_raw: str | int = Field(alias="trade_id")
    price_raw: RawDecimal = Field(alias="price")
    size_raw: RawDecimal = Field(alias="size")
    side: str  # "buy" or "sell"
    time: str

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    @property
    def price(self) -> Decimal:
        """Get trade price."""
        return _to_decimal(self.price_raw)

    @property
    def size(self) -> Decimal:
        """Get trade size."""
        return _to_decimal(self.size_raw)

    @property
    def trade_id(self) -> str:
        """Get unique trade identifier."""
        return str(self.trade_id_raw)


class AbucoinsTicker(BaseModel):
    """
    Ticker from ``GET /products/<product-id>/ticker``.

    ``time`` can be missing on illiquid products; the adapter rejects such
    tickers.
    """

    trade_id_raw: str | int | None = Field(alias="trade_id", default=None)
    price_raw: RawDecimal | None = Field(alias="price", default=None)
    size_raw: RawDecimal | None = Field(alias="size", default=None)
    bid_raw: RawDecimal | None = Field(alias="bid", default=None)
    ask_raw: RawDecimal | None = Field(alias="ask", default=None)
    volume_raw: RawDecimal | None = Field(alias="volume", default=None)
    time: str | None = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    @property
    def price(self) -> Decimal | None:
        """Get last trade price."""
        return _to_optional_decimal(self.price_raw)

    @property
    def size(self) -> Decimal | None:
        """Get last trade size."""
        return _to_optional_decimal(self.size_raw)

    @property
    def bid(self) -> Decimal | None:
        """Get best bid price."""
        return _to_optional_decimal(self.bid_raw)

    @property
    def ask(self) -> Decimal | None:
        """Get best ask price."""
        return _to_optional_decimal(self.ask_raw)

    @property
    def volume(self) -> Decimal | None:
        """Get 24-hour trading volume."""
        return _to_optional_decimal(self.volume_raw)


class AbucoinsPriceLevel(BaseModel):
    """
    One entry of an order book side.

    Abucoins sends levels as ``[price, size, num_orders]`` arrays; the
    object form is accepted as well.
    """

    price_raw: RawDecimal = Field(alias="price")
    size_raw: RawDecimal = Field(alias="size")
    num_orders: int | None = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    @model_validator(mode="before")
    @classmethod
    def from_array(cls, data: Any) -> Any:
        """Convert the array form into a mapping."""
        if isinstance(data, list | tuple):
            if len(data) < 2:
                raise ValueError(f"Price level needs price and size, got {data!r}")
            level: dict[str, Any] = {"price": data[0], "size": data[1]}
            if len(data) > 2:
                level["num_orders"] = data[2]
            return level
        return data

    @property
    def price(self) -> Decimal:
        """Get the price."""
        return _to_decimal(self.price_raw)

    @property
    def size(self) -> Decimal:
        """Get the size."""
        return _to_decimal(self.size_raw)


class AbucoinsOrderBook(BaseModel):
    """
    Order book from ``GET /products/<product-id>/book``.

    Either side may be absent or null. The snapshot carries no timestamp.
    """

    asks: list[AbucoinsPriceLevel] | None = None
    bids: list[AbucoinsPriceLevel] | None = None
    sequence: int | None = None

    model_config = ConfigDict(extra="ignore", frozen=True)


# Account Models
class AbucoinsAccount(BaseModel):
    """
    One currency account from ``GET /accounts``.

    Example::

        {"id": "10502694-BTC", "currency": "BTC", "balance": 0.5,
         "available": 0.4, "hold": 0.1, "profile_id": 10502694}
    """

    id: str
    profile_id: int | str
    currency: str
    balance_raw: RawDecimal = Field(alias="balance")
    available_raw: RawDecimal = Field(alias="available")
    hold_raw: RawDecimal = Field(alias="hold")

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    @property
    def balance(self) -> Decimal:
        """Get total balance."""
        return _to_decimal(self.balance_raw)

    @property
    def available(self) -> Decimal:
        """Get balance available for trading."""
        return _to_decimal(self.available_raw)

    @property
    def hold(self) -> Decimal:
        """Get balance on hold."""
        return _to_decimal(self.hold_raw)
