"""Configuration settings for the pace table application."""

from pathlib import Path
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


# __file__ = src/pace_table/config.py
# .parent.parent.parent = project root
PROJECT_ROOT = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PACE_TABLE_",
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Preferences storage (None keeps preferences in memory)
    preferences_db_path: Path | None = None

    # Defaults used when no preference has been stored yet
    default_max_pace_seconds: int = 7 * 60  # 7:00/km, slowest row
    default_min_pace_seconds: int = 3 * 60  # 3:00/km, fastest row
    default_pace_interval_seconds: int = 15
    default_vma: str = "15"
    default_split_interval_meters: int = 1000
    default_theme: str = "light"

    split_interval_options: list[int] = [100, 200, 400, 800, 1000]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
