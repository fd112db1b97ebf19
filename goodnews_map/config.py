"""Configuration utilities for the good news map service."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import timedelta

DEFAULT_FEED_URL = "https://www.goodnewsnetwork.org/feed/"
DEFAULT_GEOCODER_URL = "https://nominatim.openstreetmap.org/search"
DEFAULT_USER_AGENT = "VoiceOfPeaceDemo/1.0 (+your-email@example.com)"


@dataclass(frozen=True)
class Config:
    """Runtime configuration values for the news service."""

    feed_url: str = DEFAULT_FEED_URL
    source_name: str = "GoodNewsNetwork"
    geocoder_url: str = DEFAULT_GEOCODER_URL
    user_agent: str = DEFAULT_USER_AGENT
    language: str = "en"
    max_items: int = 12
    summary_max_chars: int = 800
    cache_ttl: timedelta = field(default_factory=lambda: timedelta(minutes=10))
    request_timeout: float = 10.0
    max_workers: int = 1
    host: str = "0.0.0.0"
    port: int = 8000

    @property
    def cache_control(self) -> str:
        """Return the Cache-Control header advertised to intermediaries."""
        return f"max-age=0, s-maxage={int(self.cache_ttl.total_seconds())}"


def load_config() -> Config:
    """Load configuration from environment variables and defaults."""

    return Config(
        feed_url=os.getenv("GOODNEWS_FEED_URL", DEFAULT_FEED_URL),
        source_name=os.getenv("GOODNEWS_SOURCE_NAME", "GoodNewsNetwork"),
        geocoder_url=os.getenv("GOODNEWS_GEOCODER_URL", DEFAULT_GEOCODER_URL),
        user_agent=os.getenv("GOODNEWS_USER_AGENT", DEFAULT_USER_AGENT),
        language=os.getenv("GOODNEWS_LANGUAGE", "en"),
        max_items=int(os.getenv("GOODNEWS_MAX_ITEMS", "12")),
        cache_ttl=timedelta(seconds=float(os.getenv("GOODNEWS_CACHE_TTL_SECONDS", "600"))),
        request_timeout=float(os.getenv("GOODNEWS_REQUEST_TIMEOUT", "10")),
        max_workers=int(os.getenv("GOODNEWS_MAX_WORKERS", "1")),
        host=os.getenv("GOODNEWS_HOST", "0.0.0.0"),
        port=int(os.getenv("GOODNEWS_PORT", "8000")),
    )
