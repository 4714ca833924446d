"""CLI tool for admin operations.

Usage:
    python -m rsi_dashboard.cli seed [n]
    python -m rsi_dashboard.cli summary
    python -m rsi_dashboard.cli serve
"""

import sys

from rsi_dashboard.config import Settings, settings as default_settings
from rsi_dashboard.services import analytics
from rsi_dashboard.services.generator import TradeGenerator, seed_if_empty
from rsi_dashboard.services.trade_store import TradeStore, create_store
from rsi_dashboard.utils.logging import setup_logging


def seed(store: TradeStore, settings: Settings, n: int | None = None):
    """Seed the store with synthetic trades if it is empty."""
    count = settings.seed_trades if n is None else n
    inserted = seed_if_empty(store, count, TradeGenerator.from_seed(settings.seed_random))
    if inserted:
        print(f"Inserted {inserted} synthetic trades.")
    else:
        print(f"Store already holds {store.count()} trades, nothing to do.")


def summary(store: TradeStore):
    """Print the dashboard numbers for the store."""
    trades = store.all()
    stats = analytics.compute_stats(trades)
    monitor = analytics.compute_monitor(trades)
    trend = analytics.compute_trend(trades)

    print(f"Trades:       {stats.total_trades}")
    print(f"Total P&L:    {stats.total_pnl:.2f} ({analytics.format_pnl_change(stats.total_pnl)})")
    print(f"Win rate:     {stats.winrate:.1f}%")
    print(f"Losses:       {stats.total_losses:.2f} over {stats.num_losses} trades")
    print(f"Last signal:  {monitor.signal} @ {monitor.current_price:.2f} (RSI {monitor.current_rsi:.2f})")
    print(f"Trend:        {trend.trend} {trend.change}")


def serve(settings: Settings):
    """Run the API with the same settings the CLI was given."""
    import uvicorn

    from rsi_dashboard.main import create_app

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


def main(argv: list[str] | None = None, settings: Settings | None = None):
    argv = sys.argv[1:] if argv is None else argv
    settings = settings or default_settings
    setup_logging(settings.log_level)

    if not argv:
        print("Usage: python -m rsi_dashboard.cli <command>")
        print("Commands: seed [n], summary, serve")
        sys.exit(1)

    command = argv[0]
    if command == "seed":
        n = None
        if len(argv) > 1:
            if not argv[1].isdigit():
                print(f"Invalid trade count: {argv[1]}")
                sys.exit(1)
            n = int(argv[1])
        seed(create_store(settings), settings, n)
    elif command == "summary":
        summary(create_store(settings))
    elif command == "serve":
        serve(settings)
    else:
        print(f"Unknown command: {command}")
        sys.exit(1)


if __name__ == "__main__":
    main()
