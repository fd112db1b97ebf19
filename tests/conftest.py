"""Shared fixtures for the news map tests."""

from datetime import datetime, timedelta, timezone

import pytest

from goodnews_map.config import Config
from goodnews_map.models import ResolvedLocation


class FakeClock:
    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


class StubGeocoder:
    """Records queries and answers from a fixed mapping."""

    def __init__(self, answers=None) -> None:
        self.answers = answers or {}
        self.queries = []

    def lookup(self, query):
        self.queries.append(query)
        return self.answers.get(query)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def config() -> Config:
    return Config(max_workers=1)


@pytest.fixture
def kenya() -> ResolvedLocation:
    return ResolvedLocation(latitude=1.44, longitude=38.43, display_name="Kenya")
