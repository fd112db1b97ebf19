"""Syndication feed retrieval and entry normalization."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional, Tuple

import feedparser
import requests
from bs4 import BeautifulSoup
from dateutil import parser as date_parser

from .config import Config
from .exceptions import FeedFetchError
from .models import Article

LOGGER = logging.getLogger(__name__)


def fetch_feed(config: Config) -> Tuple[str, List[Any]]:
    """Download and parse the configured feed.

    Returns the feed's display name and its entries in document order.
    Raises :class:`FeedFetchError` if the feed is unreachable or unparsable.
    """

    try:
        response = requests.get(
            config.feed_url,
            headers={"User-Agent": config.user_agent},
            timeout=config.request_timeout,
        )
        response.raise_for_status()
    except requests.RequestException as exc:
        LOGGER.warning("Feed request to %s failed: %s", config.feed_url, exc)
        raise FeedFetchError(f"Feed request failed: {exc}") from exc

    feed = feedparser.parse(response.content)
    if feed.bozo and not feed.entries:
        reason = feed.get("bozo_exception", "malformed document")
        raise FeedFetchError(f"Could not parse feed {config.feed_url}: {reason}")

    source = feed.feed.get("title") or config.source_name
    LOGGER.info("Fetched %d entries from %s", len(feed.entries), source)
    return source, list(feed.entries)


def strip_markup(text: Optional[str]) -> str:
    if not text:
        return ""
    return BeautifulSoup(text, "html.parser").get_text().strip()


def entry_text(entry: Mapping[str, Any]) -> str:
    """Return the entry's description, still as markup.

    The full ``content:encoded`` body is only used when the entry has no
    description at all.
    """

    description = entry.get("summary") or entry.get("description")
    if description:
        return description
    content = entry.get("content")
    if content:
        return content[0].get("value") or ""
    return ""


def parse_published(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        parsed = date_parser.parse(value)
    except (ValueError, TypeError, OverflowError):
        LOGGER.debug("Unparsable publication date %r", value)
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_entry(entry: Mapping[str, Any], source: str, now: datetime, max_chars: int = 800) -> Article:
    """Build an :class:`Article` from one feed entry."""

    published_at = parse_published(entry.get("published") or entry.get("updated"))
    return Article(
        title=entry.get("title") or "",
        summary=strip_markup(entry_text(entry))[:max_chars],
        link=entry.get("link") or "",
        published_at=published_at or now,
        source=source,
    )


__all__ = ["entry_text", "fetch_feed", "parse_entry", "parse_published", "strip_markup"]
