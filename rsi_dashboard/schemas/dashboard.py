"""Response schemas for the dashboard API."""

from datetime import datetime
from pydantic import BaseModel


class StatsRead(BaseModel):
    total_trades: int
    total_pnl: float
    winrate: float
    total_losses: float
    num_losses: int
    pnl_change: str


class MonitorRead(BaseModel):
    current_rsi: float
    current_price: float
    signal: str
    status: str


class SparklineRead(BaseModel):
    labels: list[str]
    data: list[float]


class TrendRead(BaseModel):
    trend: str
    change: str


class HealthRead(BaseModel):
    status: str
    uptime: float
    last_update: datetime
