"""Builders for trades used across tests."""

from datetime import datetime, timezone

from rsi_dashboard.models.trade import Trade
from rsi_dashboard.schemas.trade import TradeCreate


def make_trade(trade_id: int, pnl: float, signal: str = "BUY", rsi: float = 30.0) -> Trade:
    """A stored trade whose prices agree with ``pnl``."""
    entry = 50000.0
    exit_ = entry + pnl if signal == "BUY" else entry - pnl
    return Trade(
        id=trade_id,
        timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
        rsi=rsi,
        signal=signal,
        entry_price=entry,
        exit_price=exit_,
        pnl=pnl,
        is_win=pnl > 0,
    )


def make_record(pnl: float, signal: str = "BUY", rsi: float = 30.0) -> TradeCreate:
    """Unsaved input for a store with an explicit pnl."""
    entry = 50000.0
    exit_ = entry + pnl if signal == "BUY" else entry - pnl
    return TradeCreate(rsi=rsi, signal=signal, entry_price=entry, exit_price=exit_, pnl=pnl)
