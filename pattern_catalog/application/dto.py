"""Data transfer objects returned by the application services."""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from pattern_catalog.domain.pattern import Pattern


class BaseDTO(BaseModel):
    """Base class for DTOs with a stable to_dict()/from_dict() API."""
    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BaseDTO':
        return cls.model_validate(data)


class PatternDetailDTO(BaseDTO):
    """A catalogue entry together with its sample source."""

    slug: str
    name: str
    category: str
    status: str
    summary: str
    description: str = ""
    aliases: List[str] = Field(default_factory=list)
    advantages: List[str] = Field(default_factory=list)
    disadvantages: List[str] = Field(default_factory=list)
    when_to_use: List[str] = Field(default_factory=list)
    related: List[str] = Field(default_factory=list)
    sample_module: Optional[str] = None
    source: Optional[str] = None

    @classmethod
    def from_pattern(cls, pattern: Pattern, source: Optional[str] = None) -> 'PatternDetailDTO':
        return cls(
            slug=pattern.slug,
            name=pattern.name,
            category=pattern.category.value,
            status=pattern.status.value,
            summary=pattern.summary,
            description=pattern.description,
            aliases=list(pattern.aliases),
            advantages=list(pattern.advantages),
            disadvantages=list(pattern.disadvantages),
            when_to_use=list(pattern.when_to_use),
            related=list(pattern.related),
            sample_module=pattern.sample.module if pattern.sample else None,
            source=source,
        )


class CatalogProblemDTO(BaseDTO):
    """One consistency problem found in the catalogue data."""

    slug: str
    check: str
    message: str


class CatalogValidationDTO(BaseDTO):
    """Result of validating the catalogue data and its samples."""

    pattern_count: int
    checked_samples: int = 0
    problems: List[CatalogProblemDTO] = Field(default_factory=list)

    @computed_field
    @property
    def valid(self) -> bool:
        return not self.problems
