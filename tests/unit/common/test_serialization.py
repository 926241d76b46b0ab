"""Tests for common.serialization module."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from common.serialization import serialize_dataclass, to_camel_case


@dataclass
class SampleData:
    name: str
    value: int


@dataclass
class SampleWithDatetime:
    name: str
    published_at: Optional[datetime]


class TestToCamelCase:
    def test_single_word_unchanged(self) -> None:
        assert to_camel_case("title") == "title"

    def test_snake_case_converted(self) -> None:
        assert to_camel_case("published_at") == "publishedAt"
        assert to_camel_case("article_ids") == "articleIds"


class TestSerializeDataclass:
    def test_basic_dataclass_to_dict(self) -> None:
        obj = SampleData(name="test", value=42)
        assert serialize_dataclass(obj) == {"name": "test", "value": 42}

    def test_datetime_field_to_iso_string(self) -> None:
        dt = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        obj = SampleWithDatetime(name="test", published_at=dt)
        result = serialize_dataclass(obj)
        assert result["published_at"] == "2024-01-01T12:00:00+00:00"

    def test_none_datetime_kept_as_none(self) -> None:
        obj = SampleWithDatetime(name="test", published_at=None)
        assert serialize_dataclass(obj, camel_case=True) == {"name": "test", "publishedAt": None}
