"""Pattern repository interface - contract for catalogue data access."""

from abc import ABC, abstractmethod
from typing import List, Optional

from .aggregate import Pattern
from .value_objects import PatternCategory


class PatternRepository(ABC):
    """Repository interface for catalogue entries."""

    @abstractmethod
    def find_all(self) -> List[Pattern]:
        """Find all patterns."""

    @abstractmethod
    def find_by_slug(self, slug: str) -> Optional[Pattern]:
        """Find pattern by slug."""

    @abstractmethod
    def find_by_category(self, category: PatternCategory) -> List[Pattern]:
        """Find patterns of a category."""

    def exists(self, slug: str) -> bool:
        """Check whether a pattern exists."""
        return self.find_by_slug(slug) is not None
