"""Shared fixtures for the test suite."""

import pytest

from rsi_dashboard.config import Settings
from rsi_dashboard.services.trade_store import MemoryTradeStore


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        store_backend="memory",
        database_url=f"sqlite:///{tmp_path / 'trades.db'}",
        json_path=str(tmp_path / "trades.json"),
        static_dir=str(tmp_path / "no-static"),
        seed_trades=0,
        seed_random=1234,
    )


@pytest.fixture
def memory_store() -> MemoryTradeStore:
    return MemoryTradeStore()
