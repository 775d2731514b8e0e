"""Catalogue content and rendering configuration schema."""
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from pattern_catalog.domain.pattern.value_objects import PatternCategory


class CatalogConfig(BaseModel):
    """Where catalogue data lives and how it is rendered."""

    data_dir: Optional[str] = Field(None, description="Catalogue data directory (packaged data when unset)")
    template_dir: Optional[str] = Field(None, description="Directory overriding the packaged templates")
    template_name: str = Field("catalog.md.j2", description="Entry template")
    title: Optional[str] = Field(None, description="Overrides the catalogue title")
    include_stubs: bool = Field(True, description="Render stub entries")
    category_order: List[PatternCategory] = Field(
        default_factory=lambda: [
            PatternCategory.CREATIONAL,
            PatternCategory.STRUCTURAL,
            PatternCategory.BEHAVIORAL,
        ]
    )
    category_descriptions: Dict[str, str] = Field(default_factory=dict)

    @field_validator("category_order")
    @classmethod
    def validate_category_order(cls, v: List[PatternCategory]) -> List[PatternCategory]:
        if len(set(v)) != len(v):
            raise ValueError("category_order must not repeat categories")
        return v
