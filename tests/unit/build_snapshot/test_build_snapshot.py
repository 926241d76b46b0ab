"""Tests for build_snapshot.build_snapshot module."""

from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from build_snapshot.build_snapshot import build_snapshot
from common.config import load_config
from fetch_feeds.models import FeedResult

FEED_ONE = FeedResult(
    url="https://f1/rss",
    title="Feed One",
    entries=[
        {"title": "오늘 서울 지수 지수 상승", "link": "https://x/1", "published": "2024-01-01T10:00:00Z"},
        {"title": "지수 하락 우려", "link": "https://x/2", "published": "2024-01-01T11:00:00Z"},
        {"title": "", "link": "https://x/empty"},
    ],
)
FEED_TWO = FeedResult(
    url="https://f2/rss",
    title="Feed Two",
    entries=[
        {"title": "Duplicate from feed two", "link": "https://x/1"},
        {"title": "Oil prices surge", "link": "https://x/3", "summary": "Oil market rally"},
    ],
)


@pytest.fixture
def config():
    config = load_config(env={})
    config.enrich.enabled = False
    return config


@patch("build_snapshot.build_snapshot.fetch_feeds")
class TestBuildSnapshot:
    def test_referential_integrity(self, mock_fetch, config) -> None:
        mock_fetch.return_value = [FEED_ONE, FEED_TWO]

        snapshot = build_snapshot(config)

        for topic in snapshot.topics:
            assert topic.score == len(set(topic.article_ids))
            for article_id in topic.article_ids:
                assert article_id in snapshot.articles_by_id

    def test_dedup_and_exclusions(self, mock_fetch, config) -> None:
        mock_fetch.return_value = [FEED_ONE, FEED_TWO]

        snapshot = build_snapshot(config)

        assert set(snapshot.articles_by_id) == {"https://x/1", "https://x/2", "https://x/3"}
        assert snapshot.articles_by_id["https://x/1"].title == "오늘 서울 지수 지수 상승"
        assert snapshot.articles_by_id["https://x/1"].source == "Feed One"

    def test_ranking(self, mock_fetch, config) -> None:
        mock_fetch.return_value = [FEED_ONE, FEED_TWO]

        snapshot = build_snapshot(config)

        assert snapshot.topics[0].token == "지수"
        assert snapshot.topics[0].score == 2
        # score ties order ASCII tokens before Hangul ones
        assert snapshot.topics[1].token == "market"
        tokens = [topic.token for topic in snapshot.topics]
        assert "오늘" not in tokens
        assert "서울" not in tokens

    def test_zero_reachable_feeds(self, mock_fetch, config) -> None:
        mock_fetch.return_value = [
            FeedResult(url="https://f1/rss", error="timeout"),
            FeedResult(url="https://f2/rss", error="refused"),
        ]

        snapshot = build_snapshot(config)

        assert snapshot.topics == []
        assert snapshot.articles_by_id == {}

    def test_deterministic_apart_from_timestamp(self, mock_fetch, config) -> None:
        mock_fetch.return_value = [FEED_ONE, FEED_TWO]

        first = build_snapshot(config, now=datetime(2024, 1, 1, tzinfo=timezone.utc))
        second = build_snapshot(config, now=datetime(2024, 1, 2, tzinfo=timezone.utc))

        assert first.generated_at != second.generated_at
        assert first.to_dict()["topics"] == second.to_dict()["topics"]
        assert first.to_dict()["articlesById"] == second.to_dict()["articlesById"]

    def test_passes_feed_config(self, mock_fetch, config) -> None:
        mock_fetch.return_value = []
        config.feeds.urls = ["https://only/rss"]
        config.feeds.timeout_ms = 1500

        build_snapshot(config)

        mock_fetch.assert_called_once_with(["https://only/rss"], timeout_ms=1500, user_agent=config.user_agent)

    def test_respects_topic_cap(self, mock_fetch, config) -> None:
        mock_fetch.return_value = [FEED_ONE, FEED_TWO]
        config.topics.max_topics = 1

        assert len(build_snapshot(config).topics) == 1

    @patch("build_snapshot.build_snapshot.enrich_images")
    def test_enrichment_toggle(self, mock_enrich, mock_fetch, config) -> None:
        mock_fetch.return_value = [FEED_ONE]

        build_snapshot(config)
        mock_enrich.assert_not_called()

        config.enrich.enabled = True
        build_snapshot(config)
        mock_enrich.assert_called_once()
        _, kwargs = mock_enrich.call_args
        assert kwargs["max_articles"] == 40
        assert kwargs["timeout_ms"] == 7000
        assert kwargs["concurrency"] == 5
