"""Dashboard API — summary stats, recent trades, equity sparkline and trend."""

from dataclasses import asdict

from fastapi import APIRouter, Depends

from rsi_dashboard.api.deps import get_store, load_trades
from rsi_dashboard.schemas.dashboard import MonitorRead, SparklineRead, StatsRead, TrendRead
from rsi_dashboard.schemas.trade import TradeRead
from rsi_dashboard.services import analytics
from rsi_dashboard.services.trade_store import TradeStore
from rsi_dashboard.utils.constants import RECENT_TRADES_LIMIT, SPARKLINE_POINTS

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get("/stats", response_model=StatsRead)
def stats(store: TradeStore = Depends(get_store)):
    """Aggregated stats across all trades."""
    result = analytics.compute_stats(load_trades(store))
    return StatsRead(
        total_trades=result.total_trades,
        total_pnl=round(result.total_pnl, 4),
        winrate=round(result.winrate, 2),
        total_losses=round(result.total_losses, 4),
        num_losses=result.num_losses,
        pnl_change=analytics.format_pnl_change(result.total_pnl),
    )


@router.get("/trades", response_model=list[TradeRead])
def list_trades(store: TradeStore = Depends(get_store)):
    return analytics.recent_trades(load_trades(store), limit=RECENT_TRADES_LIMIT)


@router.get("/monitor", response_model=MonitorRead)
def monitor(store: TradeStore = Depends(get_store)):
    snapshot = analytics.compute_monitor(load_trades(store))
    return MonitorRead(**asdict(snapshot))


@router.get("/sparkline", response_model=SparklineRead)
def sparkline(store: TradeStore = Depends(get_store)):
    """Equity curve of the last points, summed over the full history."""
    curve = analytics.compute_equity_curve(load_trades(store))
    recent = curve.tail(SPARKLINE_POINTS).rounded(2)
    return SparklineRead(labels=recent.labels, data=recent.data)


@router.get("/trend", response_model=TrendRead)
def trend(store: TradeStore = Depends(get_store)):
    signal = analytics.compute_trend(load_trades(store))
    return TrendRead(trend=signal.trend, change=signal.change)
