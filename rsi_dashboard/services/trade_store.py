"""Append-only trade stores.

Every backend honours the same contract: ids are assigned on append and grow
strictly, ``all()`` returns a snapshot ordered by id, and a batch passed to
``extend()`` becomes visible to readers all at once.
"""

import json
import logging
import os
import threading
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

from sqlalchemy.engine import Engine
from sqlmodel import Session, select, func

from rsi_dashboard.config import Settings
from rsi_dashboard.models.trade import Trade
from rsi_dashboard.schemas.trade import TradeCreate, TradeRead

logger = logging.getLogger(__name__)


def _build_trade(record: TradeCreate, trade_id: int | None = None) -> Trade:
    """Turn validated input into a Trade, filling defaults and deriving is_win."""
    return Trade(
        id=trade_id,
        timestamp=record.timestamp or datetime.now(timezone.utc),
        symbol=record.symbol,
        rsi=record.rsi,
        signal=record.signal,
        entry_price=record.entry_price,
        exit_price=record.exit_price,
        pnl=record.pnl,
        is_win=record.pnl > 0,
    )


class TradeStore(ABC):
    """Ordered, append-only collection of trades."""

    @abstractmethod
    def all(self) -> list[Trade]:
        """All trades, ascending by id."""

    @abstractmethod
    def extend(self, records: Sequence[TradeCreate]) -> list[Trade]:
        """Append a batch atomically and return the stored trades."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored trades."""

    def append(self, record: TradeCreate) -> Trade:
        return self.extend([record])[0]


class MemoryTradeStore(TradeStore):
    """Process-local store backed by a list."""

    def __init__(self):
        self._trades: list[Trade] = []
        self._lock = threading.Lock()

    def all(self) -> list[Trade]:
        with self._lock:
            return list(self._trades)

    def extend(self, records: Sequence[TradeCreate]) -> list[Trade]:
        with self._lock:
            next_id = self._trades[-1].id + 1 if self._trades else 1
            stored = [_build_trade(r, next_id + i) for i, r in enumerate(records)]
            self._trades.extend(stored)
        return stored

    def count(self) -> int:
        with self._lock:
            return len(self._trades)


class JsonFileTradeStore(TradeStore):
    """Store backed by a single JSON array on disk.

    Writes go to a sibling temp file that is swapped in with ``os.replace``,
    so readers see either the old or the new file, never a partial batch.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _load(self) -> list[Trade]:
        if not self.path.exists():
            return []
        with self.path.open("r", encoding="utf-8") as fh:
            rows = json.load(fh)
        return [Trade(**TradeRead.model_validate(row).model_dump()) for row in rows]

    def _dump(self, trades: list[Trade]):
        rows = [TradeRead.model_validate(t).model_dump(mode="json") for t in trades]
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        with tmp_path.open("w", encoding="utf-8") as fh:
            json.dump(rows, fh, indent=2)
        os.replace(tmp_path, self.path)

    def all(self) -> list[Trade]:
        return self._load()

    def extend(self, records: Sequence[TradeCreate]) -> list[Trade]:
        with self._lock:
            trades = self._load()
            next_id = trades[-1].id + 1 if trades else 1
            stored = [_build_trade(r, next_id + i) for i, r in enumerate(records)]
            if stored:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self._dump(trades + stored)
        return stored

    def count(self) -> int:
        return len(self._load())


class SqlTradeStore(TradeStore):
    """Store backed by the ``trade`` table."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def all(self) -> list[Trade]:
        with Session(self.engine) as session:
            return list(session.exec(select(Trade).order_by(Trade.id)).all())

    def extend(self, records: Sequence[TradeCreate]) -> list[Trade]:
        stored = [_build_trade(r) for r in records]
        if not stored:
            return stored
        # One commit, one transaction
        with Session(self.engine) as session:
            session.add_all(stored)
            session.commit()
            for trade in stored:
                session.refresh(trade)
        return stored

    def count(self) -> int:
        with Session(self.engine) as session:
            return session.exec(select(func.count()).select_from(Trade)).one()


def create_store(settings: Settings) -> TradeStore:
    """Instantiate the backend named by ``settings.store_backend``."""
    backend = settings.store_backend.lower()
    if backend == "memory":
        store = MemoryTradeStore()
    elif backend == "json":
        store = JsonFileTradeStore(settings.json_path)
    elif backend == "sql":
        from rsi_dashboard.database import create_db_engine, create_db_and_tables

        engine = create_db_engine(settings.database_url)
        create_db_and_tables(engine)
        store = SqlTradeStore(engine)
    else:
        raise ValueError(f"Unknown store backend: {settings.store_backend}")

    logger.info(f"Using {backend} trade store")
    return store
