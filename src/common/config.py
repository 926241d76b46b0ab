"""Configuration loader for the snapshot pipeline."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

DEFAULT_FEEDS = [
    "https://news.google.com/rss?hl=ko&gl=KR&ceid=KR:ko",
    "https://feeds.reuters.com/reuters/topNews",
]

DEFAULT_USER_AGENT = "NewsCardsPages/1.0 (+contact: you@example.com)"

CONFIG_ENV_VAR = "SNAPSHOT_CONFIG"


class ConfigError(ValueError):
    """Raised when configuration values are missing or invalid."""


@dataclass
class FeedConfig:
    urls: list[str] = field(default_factory=lambda: list(DEFAULT_FEEDS))
    timeout_ms: int = 15000


@dataclass
class EnrichConfig:
    enabled: bool = True
    max_articles: int = 40
    timeout_ms: int = 7000
    concurrency: int = 5


@dataclass
class TopicConfig:
    # 32 and 40 have both been used in production
    max_topics: int = 32
    colors: bool = True


@dataclass
class OutputConfig:
    path: str = "docs/data/latest.json"


@dataclass
class PipelineConfig:
    feeds: FeedConfig = field(default_factory=FeedConfig)
    enrich: EnrichConfig = field(default_factory=EnrichConfig)
    topics: TopicConfig = field(default_factory=TopicConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    user_agent: str = DEFAULT_USER_AGENT


def load_yaml(path: Path) -> dict:
    """Load YAML file and return dict."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


def parse_feed_list(value: str | list[str] | None) -> list[str]:
    """Split a comma-separated feed list, dropping blanks."""
    if value is None:
        return []
    parts = value.split(",") if isinstance(value, str) else value
    return [str(part).strip() for part in parts if str(part).strip()]


def _to_int(value: Any, name: str) -> int:
    # bool is an int subclass and floats would truncate silently
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    try:
        result = int(value)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from exc
    if result < 1:
        raise ConfigError(f"{name} must be >= 1, got {result}")
    return result


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"{name} must be a mapping, got {type(section).__name__}")
    return section


def _parse_feed_urls(feeds: Mapping[str, Any], default: list[str]) -> list[str]:
    if "urls" not in feeds:
        return list(default)
    value = feeds["urls"]
    if value is not None and not isinstance(value, (str, list)):
        raise ConfigError(f"feeds.urls must be a list or comma-separated string, got {value!r}")
    urls = parse_feed_list(value)
    if not urls:
        raise ConfigError("feeds.urls is set but contains no URLs")
    return urls


def _parse_config(data: Mapping[str, Any]) -> PipelineConfig:
    """Parse config dictionary into PipelineConfig, falling back to defaults."""
    defaults = PipelineConfig()
    feeds = _section(data, "feeds")
    enrich = _section(data, "enrich")
    topics = _section(data, "topics")
    output = _section(data, "output")

    return PipelineConfig(
        feeds=FeedConfig(
            urls=_parse_feed_urls(feeds, defaults.feeds.urls),
            timeout_ms=_to_int(feeds.get("timeout_ms", defaults.feeds.timeout_ms), "feeds.timeout_ms"),
        ),
        enrich=EnrichConfig(
            enabled=_to_bool(enrich.get("enabled", defaults.enrich.enabled)),
            max_articles=_to_int(enrich.get("max_articles", defaults.enrich.max_articles), "enrich.max_articles"),
            timeout_ms=_to_int(enrich.get("timeout_ms", defaults.enrich.timeout_ms), "enrich.timeout_ms"),
            concurrency=_to_int(enrich.get("concurrency", defaults.enrich.concurrency), "enrich.concurrency"),
        ),
        topics=TopicConfig(
            max_topics=_to_int(topics.get("max_topics", defaults.topics.max_topics), "topics.max_topics"),
            colors=_to_bool(topics.get("colors", defaults.topics.colors)),
        ),
        output=OutputConfig(
            path=str(output.get("path") or defaults.output.path),
        ),
        user_agent=str(data.get("user_agent") or defaults.user_agent),
    )


def _apply_env(config: PipelineConfig, env: Mapping[str, str]) -> PipelineConfig:
    """Override config values with environment variables when set."""
    if env.get("FEEDS"):
        urls = parse_feed_list(env["FEEDS"])
        if not urls:
            raise ConfigError("FEEDS is set but contains no URLs")
        config.feeds.urls = urls
    if env.get("FEED_TIMEOUT_MS"):
        config.feeds.timeout_ms = _to_int(env["FEED_TIMEOUT_MS"], "FEED_TIMEOUT_MS")
    if env.get("ENRICH_ENABLED"):
        config.enrich.enabled = _to_bool(env["ENRICH_ENABLED"])
    if env.get("ENRICH_MAX_ARTICLES"):
        config.enrich.max_articles = _to_int(env["ENRICH_MAX_ARTICLES"], "ENRICH_MAX_ARTICLES")
    if env.get("ENRICH_TIMEOUT_MS"):
        config.enrich.timeout_ms = _to_int(env["ENRICH_TIMEOUT_MS"], "ENRICH_TIMEOUT_MS")
    if env.get("ENRICH_CONCURRENCY"):
        config.enrich.concurrency = _to_int(env["ENRICH_CONCURRENCY"], "ENRICH_CONCURRENCY")
    if env.get("MAX_TOPICS"):
        config.topics.max_topics = _to_int(env["MAX_TOPICS"], "MAX_TOPICS")
    if env.get("TOPIC_COLORS"):
        config.topics.colors = _to_bool(env["TOPIC_COLORS"])
    if env.get("OUTPUT_PATH"):
        config.output.path = env["OUTPUT_PATH"]
    if env.get("USER_AGENT"):
        config.user_agent = env["USER_AGENT"]
    return config


def load_config(
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> PipelineConfig:
    """Load pipeline configuration.

    Defaults are overlaid by the YAML file (if any) and then by environment
    variables.

    Args:
        config_path: Path to a YAML config file. If None, uses the
            SNAPSHOT_CONFIG env var when set.
        env: Environment mapping (defaults to os.environ).

    Returns:
        Loaded PipelineConfig

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ConfigError: If the file is malformed or a value is invalid
    """
    if env is None:
        env = os.environ

    if config_path is None and env.get(CONFIG_ENV_VAR):
        config_path = Path(env[CONFIG_ENV_VAR])

    data: dict = {}
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        try:
            data = load_yaml(config_path)
        except yaml.YAMLError as e:
            raise ConfigError(f"Malformed config file {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config file must contain a mapping: {config_path}")

    return _apply_env(_parse_config(data), env)
