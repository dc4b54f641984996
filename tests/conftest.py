"""Shared fixtures."""

import pytest

from filmo_scraper.config import AppConfig
from filmo_scraper.storage import JsonSink


@pytest.fixture
def config(tmp_path) -> AppConfig:
    cfg = AppConfig(output_dir=str(tmp_path / "scraped"), log_dir=str(tmp_path / "logs"))
    cfg.fetch.rate_limit = 0
    return cfg


@pytest.fixture
def sink(config) -> JsonSink:
    return JsonSink(config.output_dir)
