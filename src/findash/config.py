"""Application settings, read from the environment and ``.env``."""
from __future__ import annotations
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore",
    )

    data_dir: Path = Path("data")
    DATABASE_URL: str | None = None

    # Dashboard view → backend
    API_BASE_URL: str = "http://127.0.0.1:8000"
    API_TIMEOUT_SECONDS: float = 30.0
    RECENT_TRANSACTIONS_LIMIT: int = 5

    # Presentation
    CURRENCY_SYMBOL: str = "$"
    DASHBOARD_USER_NAME: str = ""

    LOG_LEVEL: str = "INFO"

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"sqlite:///{self.data_dir / 'findash.db'}"


settings = Settings()
