"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Resolver
    lock_stripes: int = Field(
        default=64,
        ge=1,
        description="Number of lock stripes guarding per-user record mutations",
    )

    # Identity (set by the upstream gateway after authentication)
    user_header: str = Field(
        default="X-User-Id",
        description="Request header carrying the authenticated user id",
    )
    bootstrap_admin_id: str | None = Field(
        default=None,
        description="User registered as super_admin at startup",
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, description="Bind port")

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
