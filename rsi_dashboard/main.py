"""FastAPI application entry point."""

import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from rsi_dashboard.config import Settings, settings as default_settings
from rsi_dashboard.services.generator import TradeGenerator, seed_if_empty
from rsi_dashboard.services.trade_store import TradeStore, create_store
from rsi_dashboard.utils.logging import setup_logging
from rsi_dashboard.api import dashboard, system

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, store: TradeStore | None = None) -> FastAPI:
    """Build the app. ``store`` overrides the backend named in settings."""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events."""
        setup_logging(settings.log_level)
        app.state.store = store if store is not None else create_store(settings)
        if settings.seed_trades > 0:
            seed_if_empty(
                app.state.store,
                settings.seed_trades,
                TradeGenerator.from_seed(settings.seed_random),
            )
        app.state.started_at = time.monotonic()
        logger.info(f"RSI Dashboard ready on port {settings.port}")

        yield

    app = FastAPI(
        title="RSI Dashboard",
        description="Trade analytics for an RSI strategy dashboard",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount routers
    app.include_router(dashboard.router)
    app.include_router(system.router)

    # Serve the dashboard page (must be after all API routers)
    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")

    return app


app = create_app()
