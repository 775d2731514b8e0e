"""Unified configuration management for the application."""
from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Optional

from pattern_catalog.config.loader import ConfigurationLoader
from pattern_catalog.config.schemas import (
    AppConfig,
    CatalogConfig,
    EventsConfig,
    LintConfig,
    LoggingConfig,
    validate_config,
)

logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Single source of truth for configuration.

    Configuration is loaded lazily on first access from, in order of
    precedence: environment overrides, the explicit or discovered
    configuration file, and schema defaults.
    """

    def __init__(self, config_file: Optional[str] = None,
                 loader: Optional[ConfigurationLoader] = None):
        self._config_file = config_file
        self._loader = loader
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        """Explicit configuration file, if one was given."""
        return self._config_file

    @property
    def loader(self) -> ConfigurationLoader:
        """Lazy load configuration loader."""
        if self._loader is None:
            self._loader = ConfigurationLoader()
        return self._loader

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        config_data = self.loader.load_configuration(self._config_file)
        config_data = self.loader.apply_environment_overrides(config_data)
        config = validate_config(config_data)
        logger.debug("Configuration loaded (file=%s)", self._config_file or "auto")
        return config

    def reload(self) -> AppConfig:
        """Drop the cached configuration and load it again."""
        with self._lock:
            self._app_config = None
        return self.app_config

    def get_logging_config(self) -> LoggingConfig:
        return self.app_config.logging

    def get_catalog_config(self) -> CatalogConfig:
        return self.app_config.catalog

    def get_lint_config(self) -> LintConfig:
        return self.app_config.lint

    def get_events_config(self) -> EventsConfig:
        return self.app_config.events

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dotted key, e.g. ``lint.strict``."""
        value: Any = self.app_config.model_dump()
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def to_dict(self) -> Dict[str, Any]:
        return self.app_config.model_dump(mode="json")

    def validate_file(self, config_path: str) -> AppConfig:
        """Validate a configuration file without making it current."""
        data = self.loader.load_configuration(config_path)
        return validate_config(self.loader.apply_environment_overrides(data))
