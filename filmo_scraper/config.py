"""YAML config loader."""

import os
from dataclasses import dataclass, field
from typing import List, Optional

import yaml

from .errors import ConfigurationError

PERSIST_POLICIES = ("record", "page")


@dataclass
class FetchConfig:
    timeout: int = 60
    rate_limit: float = 1.0
    user_agent: str = "FilmoScraper/1.0 (+https://github.com/)"
    accept_language: str = "en-US,en;q=0.9,ro;q=0.8"
    allowed_domains: List[str] = field(default_factory=lambda: ["www.imdb.com"])


@dataclass
class CrawlConfig:
    persist_policy: str = "record"  # record, page
    continue_on_error: bool = False


@dataclass
class FilmoConfig:
    sort: str = "year"
    sort_order: str = "asc"
    title_type: str = "movie"


@dataclass
class AppConfig:
    output_dir: str = "scraped"
    log_dir: str = "logs"
    log_level: str = "INFO"
    fetch: FetchConfig = field(default_factory=FetchConfig)
    crawl: CrawlConfig = field(default_factory=CrawlConfig)
    filmography: FilmoConfig = field(default_factory=FilmoConfig)


def _section(cls, raw: dict, name: str):
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"config section '{name}' must be a mapping")
    return cls(**{k: v for k, v in section.items() if k in cls.__dataclass_fields__})


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load an AppConfig from a YAML file, or return defaults when no path is given."""
    if config_path is None:
        return AppConfig()

    if not os.path.exists(config_path):
        raise ConfigurationError(f"config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"cannot read config {config_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigurationError(f"config {config_path} must be a mapping")

    crawl = _section(CrawlConfig, raw, "crawl")
    if crawl.persist_policy not in PERSIST_POLICIES:
        raise ConfigurationError(
            f"crawl.persist_policy must be one of {', '.join(PERSIST_POLICIES)}, "
            f"got '{crawl.persist_policy}'"
        )

    return AppConfig(
        output_dir=raw.get("output_dir", "scraped"),
        log_dir=raw.get("log_dir", "logs"),
        log_level=str(raw.get("log_level", "INFO")),
        fetch=_section(FetchConfig, raw, "fetch"),
        crawl=crawl,
        filmography=_section(FilmoConfig, raw, "filmography"),
    )
