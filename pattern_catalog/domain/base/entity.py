"""Base domain models - foundation for catalogue objects."""
from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for immutable domain values."""
    model_config = ConfigDict(frozen=True)


class Entity(BaseModel, ABC):
    """Base class for identified domain objects."""
    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
    )

    @abstractmethod
    def get_id(self) -> Any:
        """Get the entity identifier."""

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same ID and type."""
        if not isinstance(other, self.__class__):
            return False
        return self.get_id() == other.get_id()

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        return hash((self.__class__, self.get_id()))
