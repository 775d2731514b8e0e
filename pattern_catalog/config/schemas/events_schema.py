"""Event publishing configuration schema."""

from pydantic import BaseModel, Field, field_validator


class EventsConfig(BaseModel):
    """Event publisher settings."""

    enabled: bool = Field(True, description="Publish domain events")
    mode: str = Field("logging", description="logging or sync")

    @field_validator("mode")
    @classmethod
    def validate_mode(cls, v: str) -> str:
        if v not in ("logging", "sync"):
            raise ValueError(f"Invalid events mode '{v}'. Must be one of: ['logging', 'sync']")
        return v
