"""Data models for the build_snapshot pipeline stage."""

from dataclasses import dataclass, field
from datetime import datetime

from common.serialization import serialize_dataclass
from extract_topics.models import Topic
from normalize_articles.models import Article


@dataclass
class Snapshot:
    """Published document for one pipeline run."""
    generated_at: datetime
    topics: list[Topic] = field(default_factory=list)
    articles_by_id: dict[str, Article] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Serialize to the JSON shape the browser client reads."""
        topics = []
        for topic in self.topics:
            record = serialize_dataclass(topic, camel_case=True)
            if record["color"] is None:
                del record["color"]
            topics.append(record)

        return {
            "generatedAt": self.generated_at.isoformat(),
            "topics": topics,
            "articlesById": {
                article_id: serialize_dataclass(article, camel_case=True)
                for article_id, article in self.articles_by_id.items()
            },
        }
