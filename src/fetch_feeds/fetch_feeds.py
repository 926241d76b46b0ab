"""Concurrent multi-feed fetching."""

import logging
from concurrent.futures import ThreadPoolExecutor

from fetch_feeds.fetch_rss_feed import fetch_rss_feed
from fetch_feeds.models import FeedResult

logger = logging.getLogger(__name__)

MAX_FEED_WORKERS = 8


def _fetch_one(feed_url: str, timeout_ms: int, user_agent: str) -> FeedResult:
    try:
        result = fetch_rss_feed(feed_url, timeout_ms, user_agent)
    except Exception as e:
        logger.error("Failed to fetch feed %s: %s", feed_url, e)
        return FeedResult(url=feed_url, error=str(e))

    logger.info("Found %d entries in %s", len(result.entries), feed_url)
    return result


def fetch_feeds(
    feed_urls: list[str],
    timeout_ms: int,
    user_agent: str,
    max_workers: int = MAX_FEED_WORKERS,
) -> list[FeedResult]:
    """Fetch all feeds concurrently.

    Returns one FeedResult per URL in the same order as `feed_urls`. A
    failing feed yields a result with `error` set and no entries.
    """
    if not feed_urls:
        return []

    logger.info("Fetching %d feeds", len(feed_urls))
    workers = max(1, min(max_workers, len(feed_urls)))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        # map() yields in submission order regardless of completion order
        results = list(
            executor.map(lambda url: _fetch_one(url, timeout_ms, user_agent), feed_urls)
        )

    failed = sum(1 for result in results if not result.ok)
    if failed:
        logger.warning("%d of %d feeds failed", failed, len(results))
    return results
