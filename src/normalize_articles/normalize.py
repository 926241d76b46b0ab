"""Map raw feed entries to articles, deduplicate, and sort."""

import logging
from datetime import datetime
from typing import Any, Iterable, Optional

from common.datetime import EPOCH, parse_datetime
from common.text import clean_html, normalize_text
from fetch_feeds.models import FeedResult
from normalize_articles.models import Article

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "RSS"

# Ordered fallback chains over provider-specific entry fields
LINK_FIELDS = ("link", "guid", "id")
DESCRIPTION_FIELDS = ("summary", "description")
DATE_FIELDS = ("published", "updated", "created")


def get_value(raw: Any, key: str) -> Any:
    """Get value from a parser mapping or object attribute."""
    if isinstance(raw, dict):
        return raw.get(key)
    return getattr(raw, key, None)


def _first_value(entry: Any, keys: Iterable[str]) -> str:
    for key in keys:
        value = get_value(entry, key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return ""


def _entry_description(entry: Any) -> str:
    description = clean_html(_first_value(entry, DESCRIPTION_FIELDS))
    if description:
        return description

    for content in get_value(entry, "content") or []:
        value = clean_html(get_value(content, "value"))
        if value:
            return value
    return ""


def _is_http_url(value: Any) -> bool:
    return isinstance(value, str) and value.startswith(("http://", "https://"))


def _entry_image(entry: Any) -> Optional[str]:
    """Return the first image URL embedded in the entry, if any."""
    for media in get_value(entry, "media_content") or []:
        url = get_value(media, "url")
        medium = get_value(media, "medium") or ""
        media_type = get_value(media, "type") or ""
        is_image = medium == "image" or media_type.startswith("image/") or not (medium or media_type)
        if _is_http_url(url) and is_image:
            return url

    for thumbnail in get_value(entry, "media_thumbnail") or []:
        url = get_value(thumbnail, "url")
        if _is_http_url(url):
            return url

    for enclosure in get_value(entry, "enclosures") or []:
        url = get_value(enclosure, "href") or get_value(enclosure, "url")
        if _is_http_url(url) and (get_value(enclosure, "type") or "").startswith("image/"):
            return url

    return None


def _entry_published_at(entry: Any) -> Optional[datetime]:
    """Return the first date field that parses, trying them in order."""
    for key in DATE_FIELDS:
        value = get_value(entry, key)
        if isinstance(value, str) and value.strip():
            published_at = parse_datetime(value.strip())
            if published_at is not None:
                return published_at
    return None


def normalize_entry(entry: Any, source: str) -> Optional[Article]:
    """Normalize a single raw feed entry.

    Returns None for entries without a usable title or link.
    """
    title = normalize_text(get_value(entry, "title"))
    link = _first_value(entry, LINK_FIELDS)
    if not title or not link:
        return None

    # link already falls back to guid/id, so it is the identity key
    article_id = link

    return Article(
        id=article_id,
        title=title,
        link=link,
        description=_entry_description(entry),
        source=source,
        published_at=_entry_published_at(entry),
        image=_entry_image(entry),
    )


def _sort_key(article: Article):
    return article.published_at or EPOCH


def normalize_articles(feed_results: list[FeedResult]) -> list[Article]:
    """Normalize entries of all successful feeds into a deduplicated list.

    Feeds are processed in the given order, so when two entries share an
    identity key the one from the earlier feed is kept. The result is
    sorted newest first; undated articles sink to the end.
    """
    articles: list[Article] = []
    seen_ids: set[str] = set()
    dropped = 0

    for result in feed_results:
        if not result.ok:
            continue

        source = normalize_text(result.title) or DEFAULT_SOURCE
        for entry in result.entries:
            article = normalize_entry(entry, source)
            if article is None:
                dropped += 1
                continue
            if article.id in seen_ids:
                continue
            seen_ids.add(article.id)
            articles.append(article)

    articles.sort(key=_sort_key, reverse=True)
    logger.info("Normalized %d unique articles (%d unusable entries skipped)", len(articles), dropped)
    return articles
