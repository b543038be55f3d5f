"""Application settings and configuration."""

from datetime import date
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MARKET_MOCK_",
    )

    app_name: str = "Mock Market Data API"
    app_version: str = "0.1.0"
    log_level: str = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = 3000
    cors_origins: list[str] = ["http://localhost:5173"]

    # Calendar used for same-day matching of asOf queries
    timezone: str = "UTC"

    # Synthetic data generation
    data_seed: Optional[int] = None
    price_history_start: date = date(2023, 1, 1)
    price_interval_days: int = 7
    position_window_months: int = 1


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
