"""Database models."""

from rsi_dashboard.models.trade import Trade

__all__ = [
    "Trade",
]
