"""
Application configuration and settings.
Centralized configuration management using Pydantic Settings.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        env_file=[".env", ".env.local"],  # .env.local overrides .env
    )

    # Application settings
    app_name: str = "Answer Gateway"
    environment: str = Field(default="local", validation_alias="SYSTEM_ENVIRONMENT")
    debug: bool = False

    # Logging settings
    log_level: str = "INFO"
    enable_request_logging: bool = True

    # Upstream settings. The API key always comes from the caller.
    openai_base_url: Optional[str] = None

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_local(self) -> bool:
        """Check if running in local development environment."""
        return self.environment == "local"


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
