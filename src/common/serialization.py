"""Serialization utilities."""

from dataclasses import asdict
from datetime import datetime


def to_camel_case(name: str) -> str:
    """Convert a snake_case field name to camelCase."""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def serialize_dataclass(obj, camel_case: bool = False) -> dict:
    """Serialize a dataclass to dict, converting datetimes to ISO strings."""
    data = asdict(obj)
    for key, value in data.items():
        if isinstance(value, datetime):
            data[key] = value.isoformat()
    if camel_case:
        data = {to_camel_case(key): value for key, value in data.items()}
    return data
