"""Pattern entry and catalogue models - core catalogue domain logic."""
import re
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from pattern_catalog.domain.base.entity import Entity
from .value_objects import CodeSample, PatternCategory, PatternStatus

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


class Pattern(Entity):
    """A single design pattern entry of the catalogue."""

    slug: str
    name: str
    category: PatternCategory
    status: PatternStatus = PatternStatus.COMPLETE
    order: int = 0
    summary: str
    description: str = ""
    aliases: List[str] = Field(default_factory=list)
    sample: Optional[CodeSample] = None
    advantages: List[str] = Field(default_factory=list)
    disadvantages: List[str] = Field(default_factory=list)
    when_to_use: List[str] = Field(default_factory=list)
    related: List[str] = Field(default_factory=list)

    @field_validator('slug')
    @classmethod
    def validate_slug(cls, value: str) -> str:
        if not SLUG_PATTERN.match(value):
            raise ValueError(f"slug must be kebab-case, got '{value}'")
        return value

    @field_validator('name', 'summary')
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @model_validator(mode='after')
    def validate_pattern(self) -> 'Pattern':
        """Validate completeness rules for the entry."""
        if self.slug in self.related:
            raise ValueError(f"pattern '{self.slug}' cannot be related to itself")

        if self.status == PatternStatus.COMPLETE:
            missing = []
            if self.sample is None or not self.sample.objects:
                missing.append("sample")
            for field_name in ("advantages", "disadvantages", "when_to_use"):
                if not getattr(self, field_name):
                    missing.append(field_name)
            if missing:
                raise ValueError(
                    f"complete pattern '{self.slug}' is missing: {', '.join(missing)}"
                )
        return self

    def get_id(self) -> str:
        return self.slug

    @property
    def is_stub(self) -> bool:
        return self.status == PatternStatus.STUB

    def to_summary(self) -> Dict[str, str]:
        """Short representation used by listings."""
        return {
            "slug": self.slug,
            "name": self.name,
            "category": self.category.value,
            "status": self.status.value,
            "summary": self.summary,
        }


class CategorySection(BaseModel):
    """Patterns of one category, ready for rendering."""
    model_config = ConfigDict(frozen=True)

    category: PatternCategory
    title: str
    description: str = ""
    patterns: List[Pattern] = Field(default_factory=list)


class Catalog(BaseModel):
    """The whole catalogue: title, introduction and ordered categories."""

    title: str = "Design Patterns"
    introduction: str = ""
    sections: List[CategorySection] = Field(default_factory=list)

    @classmethod
    def from_patterns(cls, patterns: List[Pattern],
                      category_order: List[PatternCategory],
                      category_descriptions: Optional[Dict[str, str]] = None,
                      title: str = "Design Patterns",
                      introduction: str = "") -> 'Catalog':
        """Group patterns by category, ordered by (order, name)."""
        descriptions = category_descriptions or {}
        sections = []
        for category in category_order:
            members = sorted(
                (p for p in patterns if p.category == category),
                key=lambda p: (p.order, p.name),
            )
            if not members:
                continue
            sections.append(CategorySection(
                category=category,
                title=category.display_name,
                description=descriptions.get(category.value, ""),
                patterns=members,
            ))
        return cls(title=title, introduction=introduction, sections=sections)

    @property
    def patterns(self) -> List[Pattern]:
        return [p for section in self.sections for p in section.patterns]
