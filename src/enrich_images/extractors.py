"""Preview image extraction backends."""

from typing import Optional, Protocol
from urllib.parse import urljoin

from lxml import etree
from lxml import html as lxml_html

PREVIEW_IMAGE_KEYS = frozenset({
    "og:image",
    "og:image:url",
    "og:image:secure_url",
    "twitter:image",
    "twitter:image:src",
})


class PreviewImageFinder(Protocol):
    """Interface for locating a preview image in an article page."""

    def find(self, page_html: str, page_url: str) -> Optional[str]:
        """Return an absolute image URL, or None if the page has none."""
        ...


class MetaTagImageFinder:
    """Find the first og:image / twitter:image meta tag in document order."""

    def find(self, page_html: str, page_url: str) -> Optional[str]:
        if not page_html or not page_html.strip():
            return None
        try:
            tree = lxml_html.fromstring(page_html)
        except (etree.ParserError, ValueError):
            return None

        for meta in tree.iter("meta"):
            key = (meta.get("property") or meta.get("name") or "").strip().lower()
            if key not in PREVIEW_IMAGE_KEYS:
                continue
            content = (meta.get("content") or "").strip()
            if not content:
                continue
            url = urljoin(page_url, content)
            if url.startswith(("http://", "https://")):
                return url
        return None
