"""Funding (deposit and withdrawal) models and request parameters."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.xchange.enums import FundingType
from src.xchange.model.currency import Currency


class FundingRecord(BaseModel):
    """A single deposit or withdrawal."""

    address: str = ""
    date: datetime
    currency: Currency
    amount: Decimal
    internal_id: str = ""
    type: FundingType
    fee: Decimal | None = None

    model_config = ConfigDict(frozen=True)


class WithdrawFundsParams(BaseModel):
    """Parameters for a withdrawal request."""

    address: str = Field(min_length=1)
    currency: Currency
    amount: Decimal = Field(gt=0)

    model_config = ConfigDict(frozen=True)


class TradeHistoryParams(BaseModel):
    """Time window for history queries."""

    start_time: datetime | None = None
    end_time: datetime | None = None

    model_config = ConfigDict(frozen=True)
