"""
Configuration management for the CDN invalidation Slack bot.
Uses Pydantic settings for type-safe environment variable handling.
"""

from functools import lru_cache
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Slack Configuration
    verification_token: str = Field(..., description="Events API verification token")
    bot_token: str = Field(..., description="Bot user OAuth token used for chat.postMessage")
    bot_name: str = Field(default="cdn_bot", description="Display name used in the help message")
    slack_signing_secret: Optional[str] = Field(default=None)

    # CloudFront Configuration
    cdn_distribution: str = Field(..., description="CloudFront distribution id to invalidate")
    aws_region: Optional[str] = Field(default=None)

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    debug: bool = Field(default=False)

    # Logging
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get the settings instance, loading it from the environment on first use."""
    return Settings()
