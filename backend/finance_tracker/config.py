"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_env: str = "development"
    app_debug: bool = True

    # Storage: single JSON document keyed by storage key
    data_file: str = "data/finance_tracker.json"

    # Calendar used to derive "today" when no reference date is given
    app_timezone: str = "UTC"

    # Budget returned until the user saves one
    default_monthly_limit: float = 5000.0
    default_alert_threshold: int = 80

    # Charts
    monthly_series_months: int = 6

    # CORS
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
