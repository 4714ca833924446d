"""Trade model — immutable record of every completed trade."""

from datetime import datetime, timezone
from sqlmodel import SQLModel, Field

from rsi_dashboard.utils.constants import DEFAULT_SYMBOL


class Trade(SQLModel, table=True):
    __tablename__ = "trade"

    id: int | None = Field(default=None, primary_key=True)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    symbol: str = DEFAULT_SYMBOL
    rsi: float
    signal: str  # "BUY" or "SELL"
    entry_price: float
    exit_price: float
    pnl: float
    is_win: bool = False  # always pnl > 0, set by the store
