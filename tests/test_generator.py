"""Tests for synthetic trade generation and startup seeding."""

import logging
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from rsi_dashboard.schemas.trade import directional_pnl
from rsi_dashboard.services.generator import TradeGenerator, seed_if_empty
from rsi_dashboard.services.trade_store import MemoryTradeStore, TradeStore

from tests.helpers import make_record


@pytest.fixture
def batch():
    return TradeGenerator.from_seed(2024).generate(1000)


# ---------------------------------------------------------------------------
# 1. Per-record invariants
# ---------------------------------------------------------------------------

class TestGeneratedTrades:
    def test_exact_count(self, batch):
        assert len(batch) == 1000

    def test_signal_follows_rsi(self, batch):
        for record in batch:
            assert (record.signal == "BUY") == (record.rsi < 35)

    def test_rsi_in_bands(self, batch):
        for record in batch:
            assert 25 <= record.rsi <= 35 or 70 <= record.rsi <= 80

    def test_pnl_matches_direction(self, batch):
        for record in batch:
            expected = round(directional_pnl(record.signal, record.entry_price, record.exit_price), 4)
            assert record.pnl == expected

    def test_prices_positive_and_in_range(self, batch):
        for record in batch:
            assert record.entry_price > 0
            assert record.exit_price > 0
            assert 45000 <= record.entry_price < 55000

    def test_price_change_bounds(self, batch):
        for record in batch:
            change = record.exit_price / record.entry_price - 1
            assert -0.024 - 1e-9 <= change < 0.036 + 1e-9

    def test_bands_split_roughly_evenly(self, batch):
        buys = sum(1 for r in batch if r.signal == "BUY")
        assert 400 < buys < 600

    def test_is_win_derived_on_store(self, batch):
        store = MemoryTradeStore()
        store.extend(batch)
        for trade in store.all():
            assert trade.is_win == (trade.pnl > 0)


# ---------------------------------------------------------------------------
# 2. Randomness and timestamps
# ---------------------------------------------------------------------------

def test_same_seed_same_batch():
    now = datetime(2024, 6, 1, tzinfo=timezone.utc)
    first = TradeGenerator.from_seed(7).generate(20, now=now)
    second = TradeGenerator.from_seed(7).generate(20, now=now)
    assert first == second


def test_timestamps_backdated_hourly():
    now = datetime(2024, 6, 1, 12, tzinfo=timezone.utc)
    batch = TradeGenerator.from_seed(1).generate(5, now=now)
    assert batch[-1].timestamp == now
    assert batch[0].timestamp == now - timedelta(hours=4)
    for prev, cur in zip(batch, batch[1:]):
        assert cur.timestamp - prev.timestamp == timedelta(hours=1)


def test_custom_spacing():
    now = datetime(2024, 6, 1, tzinfo=timezone.utc)
    batch = TradeGenerator.from_seed(1).generate(3, now=now, spacing=timedelta(minutes=15))
    assert batch[0].timestamp == now - timedelta(minutes=30)


def test_symbol_applied():
    batch = TradeGenerator.from_seed(1, symbol="ETHUSDT").generate(3)
    assert {r.symbol for r in batch} == {"ETHUSDT"}


def test_zero_and_negative_counts():
    generator = TradeGenerator.from_seed(1)
    assert generator.generate(0) == []
    with pytest.raises(ValueError):
        generator.generate(-1)


# ---------------------------------------------------------------------------
# 3. Seeding
# ---------------------------------------------------------------------------

def test_seed_if_empty_fills_store(memory_store):
    inserted = seed_if_empty(memory_store, 50, TradeGenerator.from_seed(3))
    assert inserted == 50
    assert memory_store.count() == 50
    assert [t.id for t in memory_store.all()] == list(range(1, 51))


def test_seed_if_empty_skips_populated_store(memory_store):
    memory_store.append(make_record(5.0))
    assert seed_if_empty(memory_store, 50, TradeGenerator.from_seed(3)) == 0
    assert memory_store.count() == 1


def test_seed_uses_single_batch():
    store = MagicMock(spec=TradeStore)
    store.count.return_value = 0
    seed_if_empty(store, 10, TradeGenerator.from_seed(3))
    store.extend.assert_called_once()
    assert len(store.extend.call_args.args[0]) == 10
    store.append.assert_not_called()


def test_seed_logs_count(memory_store, caplog):
    with caplog.at_level(logging.INFO):
        seed_if_empty(memory_store, 12, TradeGenerator.from_seed(3))
    assert "Generated 12 simulated trades." in caplog.text
