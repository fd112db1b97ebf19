"""Tests for goodnews_map.cache."""

from datetime import timedelta

from goodnews_map.cache import FreshnessCache
from goodnews_map.models import Payload


def _payload(clock) -> Payload:
    return Payload(items=(), fetched_at=clock())


class TestFreshnessCache:
    def test_empty_cache_misses(self, clock) -> None:
        cache = FreshnessCache(timedelta(minutes=10), clock=clock)
        assert cache.get() is None
        assert cache.captured_at is None

    def test_hit_within_ttl(self, clock) -> None:
        cache = FreshnessCache(timedelta(minutes=10), clock=clock)
        payload = _payload(clock)
        cache.put(payload)
        clock.advance(minutes=9, seconds=59)
        assert cache.get() is payload

    def test_miss_at_exactly_ttl(self, clock) -> None:
        cache = FreshnessCache(timedelta(minutes=10), clock=clock)
        cache.put(_payload(clock))
        clock.advance(minutes=10)
        assert cache.get() is None

    def test_miss_after_ttl_keeps_entry(self, clock) -> None:
        cache = FreshnessCache(timedelta(minutes=10), clock=clock)
        cache.put(_payload(clock))
        captured = cache.captured_at
        clock.advance(hours=1)
        assert cache.get() is None
        assert cache.captured_at == captured

    def test_put_overwrites_slot(self, clock) -> None:
        cache = FreshnessCache(timedelta(minutes=10), clock=clock)
        cache.put(_payload(clock))
        clock.advance(minutes=30)
        newer = _payload(clock)
        cache.put(newer)
        assert cache.captured_at == clock()
        assert cache.get() is newer

    def test_entry_from_the_future_is_ignored(self, clock) -> None:
        cache = FreshnessCache(timedelta(minutes=10), clock=clock)
        cache.put(_payload(clock))
        clock.advance(minutes=-1)
        assert cache.get() is None
