"""Application configuration loaded from environment variables."""

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings loaded from environment."""

    def __init__(self):
        self.senate_base_url: str = os.getenv(
            "SENATE_BASE_URL",
            "https://www.senate.gov/legislative/LIS/roll_call_lists",
        ).rstrip("/")
        self.house_base_url: str = os.getenv(
            "HOUSE_BASE_URL", "https://clerk.house.gov/evs"
        ).rstrip("/")
        # Empty means the aggregator talks to the relay routes in-process
        self.relay_base_url: str = os.getenv("RELAY_BASE_URL", "").rstrip("/")
        self.http_timeout: float = float(os.getenv("HTTP_TIMEOUT", "30.0"))
        self.settings_path: str = os.getenv(
            "SETTINGS_PATH", "./vote_tracker_settings.json"
        )
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.host: str = os.getenv("HOST", "127.0.0.1")
        self.port: int = int(os.getenv("PORT", "3001"))
        self._cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self._cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
