"""Logging configuration schema."""

from pydantic import BaseModel, Field, field_validator

VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LogFileConfig(BaseModel):
    """Rotating log file settings."""

    path: str = Field("~/.pattern-catalog/logs/pattern-catalog.log", description="Log file path")
    max_size_mb: int = Field(10, ge=1, description="Maximum size before rotation")
    backup_count: int = Field(5, ge=0, description="Rotated files to keep")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("WARNING", description="Log level")
    destination: str = Field("stderr", description="stderr, stdout, file, both or none")
    format: str = Field("console", description="console or json")
    file: LogFileConfig = Field(default_factory=LogFileConfig)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v = v.upper()
        if v not in VALID_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {sorted(VALID_LEVELS)}")
        return v

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        valid = {"stderr", "stdout", "file", "both", "none"}
        if v not in valid:
            raise ValueError(f"Invalid log destination: {v}. Must be one of {sorted(valid)}")
        return v

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in ("console", "json"):
            raise ValueError(f"Invalid log format: {v}")
        return v
