"""Shared fixtures for build_snapshot tests."""

from datetime import datetime, timezone

import pytest

from build_snapshot.models import Snapshot
from extract_topics.models import Topic
from normalize_articles.models import Article

PIPELINE_ENV_VARS = [
    "SNAPSHOT_CONFIG",
    "FEEDS",
    "FEED_TIMEOUT_MS",
    "USER_AGENT",
    "ENRICH_ENABLED",
    "ENRICH_MAX_ARTICLES",
    "ENRICH_TIMEOUT_MS",
    "ENRICH_CONCURRENCY",
    "MAX_TOPICS",
    "TOPIC_COLORS",
    "OUTPUT_PATH",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in PIPELINE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def snapshot() -> Snapshot:
    article = Article(
        id="https://x/1",
        title="지수 상승",
        link="https://x/1",
        description="Stocks rose",
        source="Example",
        published_at=datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc),
    )
    return Snapshot(
        generated_at=datetime(2024, 1, 2, 0, 0, 0, tzinfo=timezone.utc),
        topics=[Topic(token="지수", score=1, article_ids=["https://x/1"], color="hsl(10deg 65% 50%)")],
        articles_by_id={article.id: article},
    )
