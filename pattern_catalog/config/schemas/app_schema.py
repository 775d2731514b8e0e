"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from pattern_catalog.domain.base.exceptions import ConfigurationError

from .catalog_schema import CatalogConfig
from .events_schema import EventsConfig
from .lint_schema import LintConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    lint: LintConfig = Field(default_factory=LintConfig)
    events: EventsConfig = Field(default_factory=EventsConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AppConfig':
        """Create configuration from a raw dictionary."""
        return validate_config(data)


def validate_config(data: Dict[str, Any]) -> AppConfig:
    """
    Validate raw configuration data.

    Raises:
        ConfigurationError: If the data does not match the schema
    """
    try:
        # an empty section in the file means the section defaults
        sections = {key: value for key, value in (data or {}).items() if value is not None}
        return AppConfig.model_validate(sections)
    except PydanticValidationError as e:
        errors = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigurationError(
            f"Invalid configuration: {'; '.join(errors)}",
            details={"errors": errors},
        ) from e
