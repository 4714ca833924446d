"""Stateless trade analytics for the dashboard.

All functions are pure computation over a snapshot of trades: no I/O, no
database access. Inputs are assumed ordered by ascending id, as returned by
``TradeStore.all()``. Rounding for display is left to the caller unless noted.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from rsi_dashboard.models.trade import Trade
from rsi_dashboard.utils.constants import (
    DEFAULT_PRICE,
    DEFAULT_RSI,
    PNL_CHANGE_DIVISOR,
    RECENT_TRADES_LIMIT,
    TREND_CHANGE_SCALE,
    TREND_WINDOW,
)


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass
class TradeStats:
    """Aggregate performance over every trade."""
    total_trades: int
    total_pnl: float
    winrate: float  # percent, 0-100
    total_losses: float  # sum of losing pnl, <= 0
    num_losses: int


@dataclass
class MonitorSnapshot:
    """Latest-state view built from the newest trade."""
    current_rsi: float
    current_price: float
    signal: str  # "BUY", "SELL" or "HOLD"
    status: str = "Running"


@dataclass
class EquityCurve:
    """Cumulative pnl after each trade."""
    labels: list[str]
    data: list[float]

    def tail(self, n: int) -> "EquityCurve":
        """Keep the last ``n`` points of an already-summed curve."""
        if n <= 0:
            return EquityCurve(labels=[], data=[])
        return EquityCurve(labels=self.labels[-n:], data=self.data[-n:])

    def rounded(self, places: int = 2) -> "EquityCurve":
        # + 0.0 turns -0.0 into 0.0
        return EquityCurve(labels=list(self.labels), data=[round(v, places) + 0.0 for v in self.data])


@dataclass
class TrendSignal:
    trend: str  # "Bullish", "Bearish" or "Neutral"
    change: str


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def format_percent(value: float) -> str:
    return f"{value:.2f}%"


def format_pnl_change(total_pnl: float) -> str:
    """Header badge next to total P&L: ``total_pnl / 100`` shown as a percent."""
    value = total_pnl / PNL_CHANGE_DIVISOR
    prefix = "+" if total_pnl > 0 else ""
    return f"{prefix}{value:.1f}%"


# ---------------------------------------------------------------------------
# Analytics
# ---------------------------------------------------------------------------

def compute_stats(records: Sequence[Trade]) -> TradeStats:
    """Totals, win rate and loss summary. All zeros for an empty history."""
    total_trades = len(records)
    if total_trades == 0:
        return TradeStats(total_trades=0, total_pnl=0, winrate=0, total_losses=0, num_losses=0)

    losses = [r.pnl for r in records if r.pnl < 0]
    wins = sum(1 for r in records if r.is_win)
    return TradeStats(
        total_trades=total_trades,
        total_pnl=sum(r.pnl for r in records),
        winrate=100 * wins / total_trades,
        total_losses=sum(losses),
        num_losses=len(losses),
    )


def compute_monitor(records: Sequence[Trade]) -> MonitorSnapshot:
    if not records:
        return MonitorSnapshot(current_rsi=DEFAULT_RSI, current_price=DEFAULT_PRICE, signal="HOLD")

    last = max(records, key=lambda r: r.id)
    return MonitorSnapshot(
        current_rsi=round(last.rsi, 2),
        current_price=round((last.entry_price + last.exit_price) / 2, 2),
        signal=last.signal,
    )


def compute_equity_curve(records: Sequence[Trade]) -> EquityCurve:
    """Running pnl total over the full history.

    Truncate with ``EquityCurve.tail`` afterwards; summing only a tail of the
    records would restart the curve at zero.
    """
    if not records:
        return EquityCurve(labels=[], data=[])

    ordered = sorted(records, key=lambda r: r.id)
    equity = np.cumsum(np.array([r.pnl for r in ordered], dtype=float))
    return EquityCurve(
        labels=[f"#{r.id}" for r in ordered],
        data=[float(v) for v in equity],
    )


def compute_trend(records: Sequence[Trade], window: int = TREND_WINDOW) -> TrendSignal:
    """Direction of the mean pnl over the last ``window`` trades.

    A mean of exactly zero reads as Bearish.
    """
    recent = sorted(records, key=lambda r: r.id)[-window:]
    if not recent:
        return TrendSignal(trend="Neutral", change="0%")

    avg = sum(r.pnl for r in recent) / len(recent)
    trend = "Bullish" if avg > 0 else "Bearish"
    return TrendSignal(trend=trend, change=format_percent(avg * TREND_CHANGE_SCALE))


def recent_trades(records: Sequence[Trade], limit: int = RECENT_TRADES_LIMIT) -> list[Trade]:
    """Newest ``limit`` trades, newest first."""
    if limit <= 0:
        return []
    return sorted(records, key=lambda r: r.id, reverse=True)[:limit]
