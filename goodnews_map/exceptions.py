"""Exception types raised by the news map service."""

from __future__ import annotations


class GoodNewsError(Exception):
    """Base class for errors raised by this package."""


class FeedFetchError(GoodNewsError):
    """The syndication feed could not be retrieved or parsed."""


__all__ = ["FeedFetchError", "GoodNewsError"]
