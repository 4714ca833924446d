"""Pydantic schemas for Trade records."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from rsi_dashboard.utils.constants import DEFAULT_SYMBOL

# Supplied pnl may differ from the derived value by rounding only
PNL_TOLERANCE = 1e-4


def directional_pnl(signal: str, entry_price: float, exit_price: float) -> float:
    """Signed price delta of a round trip: long gains when price rises, short when it falls."""
    if signal == "BUY":
        return exit_price - entry_price
    return entry_price - exit_price


class TradeCreate(BaseModel):
    """A trade as handed to the store, before it is given an id."""

    symbol: str = Field(default=DEFAULT_SYMBOL, min_length=1, max_length=32)
    timestamp: datetime | None = None
    rsi: float = Field(ge=0, le=100)
    signal: Literal["BUY", "SELL"]
    entry_price: float = Field(gt=0)
    exit_price: float = Field(gt=0)
    pnl: float | None = None

    @field_validator("symbol")
    @classmethod
    def _trim_symbol(cls, value: str) -> str:
        text = value.strip().upper()
        if not text:
            raise ValueError("must not be empty")
        return text

    @model_validator(mode="after")
    def _fill_pnl(self):
        derived = round(directional_pnl(self.signal, self.entry_price, self.exit_price), 4)
        if self.pnl is not None and abs(self.pnl - derived) > PNL_TOLERANCE:
            raise ValueError(
                f"pnl {self.pnl} does not match {self.signal} prices (expected {derived})"
            )
        self.pnl = derived
        return self


class TradeRead(BaseModel):
    id: int
    timestamp: datetime
    symbol: str
    rsi: float
    signal: str
    entry_price: float
    exit_price: float
    pnl: float
    is_win: bool

    model_config = {"from_attributes": True}
