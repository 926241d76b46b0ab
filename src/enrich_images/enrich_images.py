"""Best-effort preview image enrichment."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import requests

from common.http import HttpDocument, fetch_url
from enrich_images.extractors import MetaTagImageFinder, PreviewImageFinder
from normalize_articles.models import Article

logger = logging.getLogger(__name__)

# Preview tags live in <head>, so large pages are not worth reading
MAX_PAGE_BYTES = 2 * 1024 * 1024


def fetch_page(url: str, timeout_ms: int, user_agent: str) -> HttpDocument:
    return fetch_url(url, timeout_ms, user_agent, max_bytes=MAX_PAGE_BYTES)


def find_preview_image(
    article: Article,
    timeout_ms: int,
    user_agent: str,
    finder: PreviewImageFinder,
) -> Optional[str]:
    """Look up a preview image for one article. Never raises."""
    try:
        page = fetch_page(article.link, timeout_ms, user_agent)
        return finder.find(page.text, page.url or article.link)
    except requests.Timeout:
        logger.debug("Timed out fetching %s", article.link)
    except Exception as e:
        logger.warning("Image lookup failed for %s: %s", article.link, e)
    return None


def enrich_images(
    articles: list[Article],
    max_articles: int,
    timeout_ms: int,
    concurrency: int,
    user_agent: str,
    finder: Optional[PreviewImageFinder] = None,
) -> int:
    """Fill in `image` for articles that lack one.

    At most `max_articles` articles without an image are attempted, by a
    pool of `concurrency` workers. Each article is attempted once and
    only its own `image` field is written, and only when a URL is found.

    Returns:
        Number of images found.
    """
    if finder is None:
        finder = MetaTagImageFinder()

    candidates = [article for article in articles if article.image is None][:max_articles]
    if not candidates:
        return 0

    logger.info("Looking up preview images for %d articles", len(candidates))

    def _enrich(article: Article) -> bool:
        image = find_preview_image(article, timeout_ms, user_agent, finder)
        if image and article.image is None:
            article.image = image
            return True
        return False

    with ThreadPoolExecutor(max_workers=max(1, concurrency)) as executor:
        found = sum(executor.map(_enrich, candidates))

    logger.info("Found %d preview images", found)
    return found
