"""Catalogue data persistence."""

from pattern_catalog.infrastructure.persistence.yaml_pattern_repository import (
    DEFAULT_DATA_DIR,
    YamlPatternRepository,
)

__all__ = ["DEFAULT_DATA_DIR", "YamlPatternRepository"]
