"""Configuration management for the redirect resolver service."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from redirect_resolver.config import DEFAULT_USER_AGENT, Config


class Settings(BaseSettings):
    """Application settings using environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RR_", env_file=".env", env_file_encoding="utf-8", env_ignore_empty=True, extra="ignore"
    )

    # Core service
    environment: str = Field("development", description="Deployment environment name")
    log_level: str = Field("INFO", description="Python logging level")
    log_file: Optional[Path] = Field(None, description="Optional rotating log file shared with uvicorn")
    host: str = Field("0.0.0.0", description="Interface the HTTP server binds to")
    port: int = Field(3000, ge=1, le=65535, description="Port the HTTP server listens on")

    # Resolution
    request_timeout_seconds: float = Field(10.0, gt=0, description="HTTP request timeout per fetch")
    user_agent: str = Field(DEFAULT_USER_AGENT, description="User-Agent sent to upstream servers")
    trim_input: bool = Field(True, description="Trim input URLs to their base domain before resolving")

    # Monitoring
    enable_metrics: bool = Field(True, description="Whether to expose Prometheus metrics")

    def resolver_config(self) -> Config:
        return Config(timeout=self.request_timeout_seconds, user_agent=self.user_agent)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


__all__ = ["Settings", "get_settings"]
