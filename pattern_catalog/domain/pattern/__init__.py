"""Pattern bounded context - catalogue entries."""

from .aggregate import Catalog, CategorySection, Pattern
from .exceptions import PatternNotFoundError, PatternValidationError
from .repository import PatternRepository
from .value_objects import CodeSample, PatternCategory, PatternStatus

__all__ = [
    "Pattern",
    "Catalog",
    "CategorySection",
    "CodeSample",
    "PatternCategory",
    "PatternStatus",
    "PatternRepository",
    "PatternNotFoundError",
    "PatternValidationError",
]
