"""Tokenize article text into topic candidates."""

import re

from extract_topics.stopwords import STOPWORDS
from normalize_articles.models import Article

MIN_TOKEN_LENGTH = 2

# Anything other than ASCII digits, ASCII lowercase, or Hangul syllables
_NON_TOKEN_RE = re.compile(r"[^0-9a-z가-힣]")


def _keep(token: str) -> bool:
    if len(token) < MIN_TOKEN_LENGTH:
        return False
    if token in STOPWORDS:
        return False
    if token.isdigit():
        return False
    return True


def tokenize(text: str) -> list[str]:
    """Split text into filtered tokens, preserving order and repeats."""
    cleaned = _NON_TOKEN_RE.sub(" ", (text or "").lower())
    return [token for token in cleaned.split() if _keep(token)]


def article_tokens(article: Article) -> set[str]:
    """Unique tokens from an article's title and description."""
    return set(tokenize(f"{article.title} {article.description}"))
