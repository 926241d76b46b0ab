"""Data models for the extract_topics pipeline stage."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Topic:
    """Ranked keyword with the ids of the articles containing it."""
    token: str
    score: int
    article_ids: list[str] = field(default_factory=list)
    color: Optional[str] = None
