"""Shared fixtures for the pattern catalogue tests."""
import os
from pathlib import Path
from typing import List
from unittest.mock import patch

import pytest
import yaml

from pattern_catalog.config.schemas import CatalogConfig, LintConfig
from pattern_catalog.domain.base.events import DomainEvent
from pattern_catalog.infrastructure.events import ConfigurableEventPublisher
from pattern_catalog.infrastructure.markdown import MarkdownParser
from pattern_catalog.infrastructure.persistence import DEFAULT_DATA_DIR, YamlPatternRepository
from pattern_catalog.infrastructure.registry import SampleRegistry
from pattern_catalog.infrastructure.template import JinjaCatalogRenderer


@pytest.fixture(autouse=True)
def clean_environment():
    """Keep PATTERN_CATALOG_* variables from the developer shell out of the tests."""
    cleaned = {k: v for k, v in os.environ.items() if not k.startswith("PATTERN_CATALOG_")}
    with patch.dict(os.environ, cleaned, clear=True):
        yield


@pytest.fixture
def data_dir() -> Path:
    """The packaged catalogue data directory."""
    return DEFAULT_DATA_DIR


@pytest.fixture
def repository(data_dir) -> YamlPatternRepository:
    return YamlPatternRepository(data_dir)


@pytest.fixture
def sample_registry() -> SampleRegistry:
    """A fresh registry, independent of the process-wide singleton."""
    return SampleRegistry()


@pytest.fixture
def renderer() -> JinjaCatalogRenderer:
    return JinjaCatalogRenderer()


@pytest.fixture
def parser() -> MarkdownParser:
    return MarkdownParser()


@pytest.fixture
def lint_config() -> LintConfig:
    return LintConfig()


@pytest.fixture
def catalog_config() -> CatalogConfig:
    return CatalogConfig()


class RecordingHandler:
    """Collects the events delivered by a sync publisher."""

    def __init__(self):
        self.events: List[DomainEvent] = []

    def __call__(self, event: DomainEvent) -> None:
        self.events.append(event)


@pytest.fixture
def recorded_events():
    return RecordingHandler()


@pytest.fixture
def sync_publisher(recorded_events) -> ConfigurableEventPublisher:
    """Publisher delivering every event to ``recorded_events``."""
    publisher = ConfigurableEventPublisher(mode="sync")
    publisher.register_handler("*", recorded_events)
    return publisher


def write_pattern(directory: Path, slug: str, **fields) -> Path:
    """Write a minimal complete pattern entry into ``directory/patterns``."""
    data = {
        "slug": slug,
        "name": slug.replace("-", " ").title(),
        "category": "creational",
        "summary": f"Summary of {slug}.",
        "sample": {"module": "pattern_catalog.samples.creational.singleton",
                   "objects": ["Logger"]},
        "advantages": ["One"],
        "disadvantages": ["Two"],
        "when_to_use": ["Three"],
    }
    data.update(fields)
    patterns_dir = directory / "patterns"
    patterns_dir.mkdir(parents=True, exist_ok=True)
    path = patterns_dir / f"{slug}.yaml"
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


@pytest.fixture
def pattern_writer():
    return write_pattern
