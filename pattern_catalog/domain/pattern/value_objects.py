"""Pattern value objects - categories, status and code sample references."""
from enum import Enum
from typing import List

from pydantic import Field, field_validator

from pattern_catalog.domain.base.entity import ValueObject


class PatternCategory(str, Enum):
    """Gang-of-Four pattern categories."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"

    @property
    def display_name(self) -> str:
        return f"{self.value.capitalize()} Patterns"


class PatternStatus(str, Enum):
    """Completion state of a catalogue entry."""
    COMPLETE = "complete"
    STUB = "stub"


class CodeSample(ValueObject):
    """Reference to the importable objects that make up a code sample."""
    module: str
    objects: List[str] = Field(default_factory=list)
    language: str = "python"

    @field_validator('module')
    @classmethod
    def validate_module(cls, value: str) -> str:
        parts = value.split('.')
        if not all(part.isidentifier() for part in parts):
            raise ValueError(f"Invalid module path: {value}")
        return value

    @field_validator('objects')
    @classmethod
    def validate_objects(cls, value: List[str]) -> List[str]:
        invalid = [name for name in value if not name.isidentifier()]
        if invalid:
            raise ValueError(f"Invalid object names: {', '.join(invalid)}")
        if len(set(value)) != len(value):
            raise ValueError("Sample objects must be unique")
        return value
