"""Synthetic trade generation for seeding an empty store.

Entries are drawn the way an RSI strategy would trigger them: half from the
oversold band (long entries), half from the overbought band (short entries),
with price moves skewed slightly toward gains.
"""

import logging
from datetime import datetime, timedelta, timezone

import numpy as np

from rsi_dashboard.schemas.trade import TradeCreate, directional_pnl
from rsi_dashboard.services.trade_store import TradeStore
from rsi_dashboard.utils.constants import (
    BUY_RSI_THRESHOLD,
    DEFAULT_SYMBOL,
    ENTRY_PRICE_MIN,
    ENTRY_PRICE_SPAN,
    OVERBOUGHT_BAND,
    OVERSOLD_BAND,
    PRICE_CHANGE_BIAS,
    PRICE_CHANGE_SCALE,
)

logger = logging.getLogger(__name__)


class TradeGenerator:
    """Draws plausible historical trades from an injected random source."""

    def __init__(self, rng: np.random.Generator | None = None, symbol: str = DEFAULT_SYMBOL):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.symbol = symbol

    @classmethod
    def from_seed(cls, seed: int | None = None, symbol: str = DEFAULT_SYMBOL) -> "TradeGenerator":
        return cls(np.random.default_rng(seed), symbol=symbol)

    def _draw_rsi(self) -> float:
        low, high = OVERSOLD_BAND if self.rng.random() < 0.5 else OVERBOUGHT_BAND
        return round(float(self.rng.uniform(low, high)), 2)

    def draw(self, timestamp: datetime | None = None) -> TradeCreate:
        """Draw a single trade."""
        rsi = self._draw_rsi()
        # Derived from the stored rsi so the pair always agrees
        signal = "BUY" if rsi < BUY_RSI_THRESHOLD else "SELL"

        entry_price = ENTRY_PRICE_MIN + float(self.rng.random()) * ENTRY_PRICE_SPAN
        change_pct = (float(self.rng.random()) - PRICE_CHANGE_BIAS) * PRICE_CHANGE_SCALE
        exit_price = entry_price * (1 + change_pct)
        pnl = round(directional_pnl(signal, entry_price, exit_price), 4)

        return TradeCreate(
            symbol=self.symbol,
            timestamp=timestamp,
            rsi=rsi,
            signal=signal,
            entry_price=entry_price,
            exit_price=exit_price,
            pnl=pnl,
        )

    def generate(
        self,
        n: int,
        now: datetime | None = None,
        spacing: timedelta = timedelta(hours=1),
    ) -> list[TradeCreate]:
        """Draw ``n`` trades, back-dated ``spacing`` apart with the newest at ``now``."""
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        now = now or datetime.now(timezone.utc)
        return [self.draw(now - spacing * (n - 1 - i)) for i in range(n)]


def seed_if_empty(store: TradeStore, n: int, generator: TradeGenerator | None = None) -> int:
    """Fill an empty store with ``n`` synthetic trades in one batch.

    Returns the number of trades inserted (0 if the store already had data).
    """
    if store.count() > 0:
        logger.info("Trade store already populated, skipping seed")
        return 0

    generator = generator or TradeGenerator()
    batch = generator.generate(n)
    store.extend(batch)
    logger.info(f"Generated {len(batch)} simulated trades.")
    return len(batch)
