"""Tests for goodnews_map.config."""

from datetime import timedelta

from goodnews_map.config import DEFAULT_FEED_URL, Config, load_config


class TestLoadConfig:
    def test_defaults(self, monkeypatch) -> None:
        for name in (
            "GOODNEWS_FEED_URL",
            "GOODNEWS_MAX_ITEMS",
            "GOODNEWS_CACHE_TTL_SECONDS",
            "GOODNEWS_MAX_WORKERS",
        ):
            monkeypatch.delenv(name, raising=False)
        config = load_config()
        assert config.feed_url == DEFAULT_FEED_URL
        assert config.max_items == 12
        assert config.cache_ttl == timedelta(minutes=10)
        assert config.max_workers == 1

    def test_dataclass_default_resolves_sequentially(self) -> None:
        assert Config().max_workers == 1

    def test_environment_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("GOODNEWS_FEED_URL", "https://feeds.example.com/rss")
        monkeypatch.setenv("GOODNEWS_MAX_ITEMS", "5")
        monkeypatch.setenv("GOODNEWS_CACHE_TTL_SECONDS", "60")
        config = load_config()
        assert config.feed_url == "https://feeds.example.com/rss"
        assert config.max_items == 5
        assert config.cache_ttl == timedelta(seconds=60)


class TestCacheControl:
    def test_follows_ttl(self) -> None:
        assert Config().cache_control == "max-age=0, s-maxage=600"
        assert Config(cache_ttl=timedelta(seconds=90)).cache_control == "max-age=0, s-maxage=90"
