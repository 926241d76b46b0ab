"""Data models for the fetch_feeds pipeline stage."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class FeedResult:
    """Outcome of fetching one configured feed.

    `entries` holds the parser's raw items in feed order; they are
    provider-shaped mappings and must not be used past normalization.
    """
    url: str
    title: str = ""
    entries: list[Any] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
