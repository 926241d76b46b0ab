"""Run the full ingestion pipeline and produce a snapshot."""

import logging
from datetime import datetime
from typing import Optional

from build_snapshot.models import Snapshot
from common.config import PipelineConfig
from common.datetime import utc_now
from enrich_images.enrich_images import enrich_images
from enrich_images.extractors import PreviewImageFinder
from extract_topics.rank_topics import rank_topics
from fetch_feeds.fetch_feeds import fetch_feeds
from normalize_articles.normalize import normalize_articles

logger = logging.getLogger(__name__)


def build_snapshot(
    config: PipelineConfig,
    finder: Optional[PreviewImageFinder] = None,
    now: Optional[datetime] = None,
) -> Snapshot:
    """Fetch feeds, extract topics, enrich images, and assemble a snapshot.

    Feed and image lookup failures only thin out the result; this never
    raises for network problems.
    """
    feed_results = fetch_feeds(
        config.feeds.urls,
        timeout_ms=config.feeds.timeout_ms,
        user_agent=config.user_agent,
    )

    articles = normalize_articles(feed_results)
    if not articles:
        logger.warning("0 Articles ingested")

    topics = rank_topics(
        articles,
        max_topics=config.topics.max_topics,
        with_colors=config.topics.colors,
    )

    if config.enrich.enabled:
        enrich_images(
            articles,
            max_articles=config.enrich.max_articles,
            timeout_ms=config.enrich.timeout_ms,
            concurrency=config.enrich.concurrency,
            user_agent=config.user_agent,
            finder=finder,
        )

    return Snapshot(
        generated_at=now or utc_now(),
        topics=topics,
        articles_by_id={article.id: article for article in articles},
    )
