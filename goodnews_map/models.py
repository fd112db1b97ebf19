"""Shared dataclasses and type definitions for the news map."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Article:
    """Normalized feed entry, built once per request and never mutated."""

    title: str
    summary: str
    link: str
    published_at: datetime
    source: str


@dataclass(frozen=True)
class ResolvedLocation:
    """Best-effort location for an article.

    Latitude and longitude are either both set or both ``None``.
    ``country`` is only set when the country-name heuristic produced the match.
    """

    latitude: Optional[float] = None
    longitude: Optional[float] = None
    country: Optional[str] = None
    display_name: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be set together")

    @classmethod
    def empty(cls) -> "ResolvedLocation":
        return cls()

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None


@dataclass(frozen=True)
class EnrichedArticle:
    article: Article
    location: ResolvedLocation

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.article.title,
            "summary": self.article.summary,
            "link": self.article.link,
            "date": self.article.published_at.isoformat(),
            "source": self.article.source,
            "country": self.location.country,
            "lat": self.location.latitude,
            "lng": self.location.longitude,
            "place_name": self.location.display_name,
        }


@dataclass(frozen=True)
class Payload:
    """Response document served to clients and held by the cache."""

    items: Tuple[EnrichedArticle, ...]
    fetched_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": [item.to_dict() for item in self.items],
            "fetched": self.fetched_at.isoformat(),
        }
