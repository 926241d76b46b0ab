"""RSS feed fetching."""

import feedparser

from common.http import fetch_url
from fetch_feeds.models import FeedResult


def fetch_rss_feed(feed_url: str, timeout_ms: int, user_agent: str) -> FeedResult:
    """Fetch and parse a single RSS/Atom feed.

    Raises on network errors, a non-success status, an exceeded timeout,
    or an unparseable document with no entries. Callers decide how failures
    are recovered.
    """
    document = fetch_url(feed_url, timeout_ms, user_agent)

    feed = feedparser.parse(document.content)
    if feed.bozo and not feed.entries:
        raise ValueError(f"Malformed feed: {feed.get('bozo_exception')}")

    title = feed.feed.get("title", "")
    return FeedResult(url=feed_url, title=title, entries=list(feed.entries))
