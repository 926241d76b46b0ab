"""Data models for the normalize_articles pipeline stage."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Article:
    """Normalized, deduplicated article.

    Only `image` may change after normalization (set by enrichment).
    """
    id: str
    title: str
    link: str
    description: str
    source: str
    published_at: Optional[datetime] = None
    image: Optional[str] = None
