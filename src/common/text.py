"""Text cleanup helpers."""

import html
import re
from typing import Optional

_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: Optional[str]) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", str(text)).strip()


def clean_html(text: Optional[str]) -> str:
    """Strip HTML tags, unescape entities, and collapse whitespace."""
    if not text:
        return ""
    text = _TAG_RE.sub(" ", str(text))
    text = html.unescape(text)
    return normalize_text(text)
