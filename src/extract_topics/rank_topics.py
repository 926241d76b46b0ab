"""Frequency-based topic ranking."""

import logging

from extract_topics.colors import topic_color
from extract_topics.models import Topic
from extract_topics.tokenize import article_tokens
from normalize_articles.models import Article

logger = logging.getLogger(__name__)


def count_tokens(articles: list[Article]) -> dict[str, list[str]]:
    """Map each token to the ids of the articles containing it.

    Ids appear in article order, once per article.
    """
    contributors: dict[str, list[str]] = {}
    for article in articles:
        for token in article_tokens(article):
            contributors.setdefault(token, []).append(article.id)
    return contributors


def rank_topics(
    articles: list[Article],
    max_topics: int,
    with_colors: bool = True,
) -> list[Topic]:
    """Rank tokens by the number of articles containing them.

    Ties are broken by token, ascending. Returns at most `max_topics` topics.
    """
    if max_topics < 1:
        raise ValueError(f"max_topics must be >= 1, got {max_topics}")

    contributors = count_tokens(articles)
    ranked = sorted(contributors.items(), key=lambda item: (-len(item[1]), item[0]))

    topics = [
        Topic(
            token=token,
            score=len(article_ids),
            article_ids=article_ids,
            color=topic_color(token) if with_colors else None,
        )
        for token, article_ids in ranked[:max_topics]
    ]

    logger.info("Ranked %d topics from %d candidate tokens", len(topics), len(contributors))
    return topics
