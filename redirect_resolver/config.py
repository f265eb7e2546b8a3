"""Configuration utilities for Redirect Resolver."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)
DEFAULT_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
DEFAULT_ACCEPT_LANGUAGE = "en-US,en;q=0.9"


@dataclass
class Config:
    """Runtime configuration parameters."""

    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    accept: str = DEFAULT_ACCEPT
    accept_language: str = DEFAULT_ACCEPT_LANGUAGE
    max_transport_redirects: int = 20
    concurrency: int = 10
    summary_json: Path = Path("results.summary.json")

    def request_headers(self) -> Dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": self.accept,
            "Accept-Language": self.accept_language,
        }

    def validate(self) -> "Config":
        """Raise ``ValueError`` for settings the resolver cannot run with."""

        if self.timeout <= 0:
            raise ValueError(f"timeout must be a positive number of seconds, got {self.timeout}")
        if self.concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {self.concurrency}")
        if self.max_transport_redirects < 0:
            raise ValueError(f"max_transport_redirects must not be negative, got {self.max_transport_redirects}")
        return self


def load_config(env_file: Optional[str] = ".env") -> Config:
    """Load configuration from environment variables and optional .env file."""

    if env_file:
        load_dotenv(env_file, override=False)

    config = Config(
        timeout=float(os.getenv("RR_TIMEOUT", Config.timeout)),
        user_agent=os.getenv("RR_USER_AGENT", Config.user_agent),
        accept=os.getenv("RR_ACCEPT", Config.accept),
        accept_language=os.getenv("RR_ACCEPT_LANGUAGE", Config.accept_language),
        max_transport_redirects=int(
            os.getenv("RR_MAX_TRANSPORT_REDIRECTS", Config.max_transport_redirects)
        ),
        concurrency=int(os.getenv("RR_CONCURRENCY", Config.concurrency)),
        summary_json=Path(os.getenv("RR_SUMMARY_JSON", str(Config.summary_json))),
    )
    return config.validate()


__all__ = ["Config", "load_config"]
