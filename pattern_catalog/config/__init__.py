"""Configuration package with clean public API."""

from .schemas import (
    AppConfig,
    CatalogConfig,
    EventsConfig,
    LintConfig,
    LogFileConfig,
    LoggingConfig,
    validate_config,
)
from .loader import ConfigurationLoader
from .manager import ConfigurationManager

__all__ = [
    # Main configuration
    'AppConfig',
    'validate_config',

    # Specific configurations
    'CatalogConfig',
    'LintConfig',
    'EventsConfig',
    'LoggingConfig',
    'LogFileConfig',

    # Configuration management
    'ConfigurationManager',
    'ConfigurationLoader',
]
