"""Application configuration using Pydantic Settings."""

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App
    APP_NAME: str = "Powerball Watch"
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_FILE: Path = Path("logs/app.log")

    # Preference store (key/value)
    DATABASE_URL: str = "sqlite+aiosqlite:///./powerball_watch.db"

    # Draw page
    DRAW_PAGE_URL: str = (
        "https://www.texaslottery.com/export/sites/lottery/Games/Powerball/"
        "Winning_Numbers/print.html"
    )
    FETCH_TIMEOUT_SECONDS: float = 15.0
    FETCH_USER_AGENT: str = "Mozilla/5.0"

    # Scheduler
    SCHEDULER_ENABLED: bool = True
    CHECK_INTERVAL_HOURS: int = 12
    CHECK_JITTER_SECONDS: int = 900
    RETRY_BACKOFF_SECONDS: int = 30
    RETRY_MAX_ATTEMPTS: int = 5

    # Notifications
    NOTIFY_WEBHOOK_URL: str | None = None


settings = Settings()
