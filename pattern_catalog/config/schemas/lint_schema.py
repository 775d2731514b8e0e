"""Markdown lint configuration schema."""
from typing import List

from pydantic import BaseModel, Field, field_validator


class LintConfig(BaseModel):
    """Rules and thresholds for the markdown linter."""

    strict: bool = Field(False, description="Treat warnings as failures")
    disabled_rules: List[str] = Field(default_factory=list)
    toc_heading_names: List[str] = Field(
        default_factory=lambda: ["Table of Contents", "Contents"]
    )
    toc_levels: List[int] = Field(default_factory=lambda: [2, 3])
    pattern_heading_level: int = Field(3, ge=1, le=6)
    required_subsections: List[str] = Field(
        default_factory=lambda: ["Advantages", "Disadvantages", "When to Use"]
    )
    stub_markers: List[str] = Field(
        default_factory=lambda: ["Coming soon", "TODO", "TBD"]
    )
    python_languages: List[str] = Field(default_factory=lambda: ["python", "py", "python3"])
    json_languages: List[str] = Field(default_factory=lambda: ["json"])
    yaml_languages: List[str] = Field(default_factory=lambda: ["yaml", "yml"])

    @field_validator("toc_levels")
    @classmethod
    def validate_levels(cls, v: List[int]) -> List[int]:
        if any(level < 1 or level > 6 for level in v):
            raise ValueError("toc_levels must be between 1 and 6")
        return sorted(set(v))

    @field_validator("disabled_rules")
    @classmethod
    def normalise_rules(cls, v: List[str]) -> List[str]:
        return [rule.strip().upper() for rule in v if rule.strip()]
