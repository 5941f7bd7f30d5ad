"""
Configuration management for the Clinic Analytics Engine.
Uses pydantic-settings for type-safe environment variable handling.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)

    # Application
    APP_NAME: str = "Clinic Analytics Engine"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Security
    CLINIC_SERVICE_API_KEY: str = ""
    FRONTEND_ORIGIN: str = "http://localhost:3000"

    # Redis
    REDIS_URL: str = "redis://localhost:6379"
    ANALYTICS_CACHE_TTL: int = 300  # 5 minutes

    # Clinic data
    CLINIC_SNAPSHOT_PATH: Optional[str] = None

    # Analytics
    VISIT_TEXT_WINDOW: int = 1000
    TOP_N: int = 10
    REGISTRATION_WEEKS: int = 8

    # Rate limiting
    RATE_LIMIT_REQUESTS: int = 100
    RATE_LIMIT_WINDOW: int = 60  # seconds


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
