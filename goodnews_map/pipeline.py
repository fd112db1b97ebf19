"""High-level orchestration from feed entries to the served payload."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, List, Optional, Tuple

from .cache import Clock, FreshnessCache, utcnow
from .config import Config, load_config
from .feed import fetch_feed, parse_entry
from .geocode import GeocodeClient
from .models import Article, EnrichedArticle, Payload, ResolvedLocation
from .resolver import LocationResolver

LOGGER = logging.getLogger(__name__)

FeedFetcher = Callable[[Config], Tuple[str, List[Any]]]


class NewsPipeline:
    """Serve the enriched feed, rebuilding it only when the cache is stale.

    The pipeline owns its cache; nothing else writes to it.
    """

    def __init__(
        self,
        config: Config,
        resolver: LocationResolver,
        cache: FreshnessCache,
        fetcher: FeedFetcher = fetch_feed,
        clock: Clock = utcnow,
    ) -> None:
        self.config = config
        self.resolver = resolver
        self.cache = cache
        self.fetcher = fetcher
        self.clock = clock

    def handle(self) -> Payload:
        cached = self.cache.get()
        if cached is not None:
            LOGGER.info("Serving cached payload from %s", cached.fetched_at.isoformat())
            return cached

        LOGGER.info("Cache miss, rebuilding payload from %s", self.config.feed_url)
        source, entries = self.fetcher(self.config)
        now = self.clock()
        articles = [
            parse_entry(entry, source, now, self.config.summary_max_chars)
            for entry in entries[: self.config.max_items]
        ]

        payload = Payload(items=tuple(self._enrich_all(articles)), fetched_at=self.clock())
        self.cache.put(payload)
        located = sum(1 for item in payload.items if item.location.has_coordinates)
        LOGGER.info("Built payload with %d items (%d located)", len(payload.items), located)
        return payload

    def _enrich_all(self, articles: List[Article]) -> List[EnrichedArticle]:
        if self.config.max_workers <= 1 or len(articles) <= 1:
            return [self._enrich(article) for article in articles]
        # Executor.map yields in submission order, keeping feed order.
        with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
            return list(executor.map(self._enrich, articles))

    def _enrich(self, article: Article) -> EnrichedArticle:
        try:
            location = self.resolver.resolve(article.title, article.summary)
        except Exception as exc:
            LOGGER.exception("Location resolution failed for %s: %s", article.link, exc)
            location = ResolvedLocation.empty()
        return EnrichedArticle(article=article, location=location)


def build_pipeline(config: Optional[Config] = None) -> NewsPipeline:
    """Wire a pipeline with the default geocoder and a fresh cache."""

    config = config or load_config()
    resolver = LocationResolver(GeocodeClient(config))
    cache = FreshnessCache(config.cache_ttl)
    return NewsPipeline(config, resolver, cache)


__all__ = ["NewsPipeline", "build_pipeline"]
