"""Infrastructure patterns package."""

from pattern_catalog.infrastructure.patterns.singleton_access import get_singleton
from pattern_catalog.infrastructure.patterns.singleton_registry import SingletonRegistry

__all__ = ["SingletonRegistry", "get_singleton"]
