"""SQLModel database engine setup."""

import logging

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str) -> Engine:
    """Build an engine for the given URL."""
    # SQLite needs check_same_thread=False; PostgreSQL does not
    connect_args = {}
    kwargs = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        # In-memory SQLite lives inside one connection, so share it
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool

    return create_engine(
        database_url,
        echo=False,
        connect_args=connect_args,
        **kwargs,
    )


def create_db_and_tables(engine: Engine):
    """Create all tables. Called on startup."""
    # Register table models on the metadata before create_all
    import rsi_dashboard.models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.info(f"Database ready at {engine.url.render_as_string(hide_password=True)}")
