"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .catalog_schema import CatalogConfig
from .events_schema import EventsConfig
from .lint_schema import LintConfig
from .logging_schema import LogFileConfig, LoggingConfig

__all__ = [
    # Main configuration
    "AppConfig",
    "validate_config",
    # Section configurations
    "CatalogConfig",
    "LintConfig",
    "EventsConfig",
    "LoggingConfig",
    "LogFileConfig",
]
