"""Shared API dependencies."""

import logging

from fastapi import HTTPException, Request, status

from rsi_dashboard.models.trade import Trade
from rsi_dashboard.services.trade_store import TradeStore

logger = logging.getLogger(__name__)


def get_store(request: Request) -> TradeStore:
    """The store created at startup."""
    return request.app.state.store


def load_trades(store: TradeStore) -> list[Trade]:
    """Snapshot the store, turning read failures into a 500."""
    try:
        return store.all()
    except Exception as e:
        logger.exception(f"Failed to read trade store: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
