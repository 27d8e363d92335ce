"""Configuration management using pydantic-settings."""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    app_name: str = "style-consistency-engine"

    # Engine defaults
    color_tolerance: int = Field(default=20, ge=0, le=100)
    default_transfer_strength: int = Field(default=75, ge=0, le=100)

    # Server settings
    backend_host: str = "localhost"
    backend_port: int = 8000
    frontend_port: int = 3000


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
