"""Application configuration via environment variables."""

from pathlib import Path
from pydantic_settings import BaseSettings

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    database_url: str = "sqlite:///./trades.db"
    store_backend: str = "sql"  # "memory", "json" or "sql"
    json_path: str = "trades.json"
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]
    static_dir: str = str(PROJECT_ROOT / "public")

    # Seeding
    seed_trades: int = 1000
    seed_random: int | None = None  # fixed seed for reproducible demo data

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    model_config = {"env_prefix": "RSI_", "env_file": ".env"}


settings = Settings()
