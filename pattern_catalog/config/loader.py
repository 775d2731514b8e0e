"""Configuration loading from files and environment variables."""
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from pattern_catalog.domain.base.exceptions import ConfigurationError
from pattern_catalog.config.utils.env_expansion import expand_config_env_vars

logger = logging.getLogger(__name__)

ENV_PREFIX = "PATTERN_CATALOG_"
CONFIG_ENV_VAR = f"{ENV_PREFIX}CONFIG"


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _parse_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


# env suffix -> (section, key, converter)
ENV_OVERRIDES = {
    "LOG_LEVEL": ("logging", "level", str),
    "LOG_DESTINATION": ("logging", "destination", str),
    "LOG_FORMAT": ("logging", "format", str),
    "LOG_FILE": ("logging", "file.path", str),
    "DATA_DIR": ("catalog", "data_dir", str),
    "TEMPLATE_DIR": ("catalog", "template_dir", str),
    "TITLE": ("catalog", "title", str),
    "INCLUDE_STUBS": ("catalog", "include_stubs", _parse_bool),
    "STRICT": ("lint", "strict", _parse_bool),
    "DISABLED_RULES": ("lint", "disabled_rules", _parse_list),
    "EVENTS_MODE": ("events", "mode", str),
    "EVENTS_ENABLED": ("events", "enabled", _parse_bool),
}


class ConfigurationLoader:
    """Loads raw configuration data from files and the environment."""

    DEFAULT_FILE_NAMES = [
        "pattern-catalog.yaml",
        "pattern-catalog.yml",
        "pattern-catalog.json",
    ]

    def __init__(self, search_paths: Optional[List[Path]] = None):
        if search_paths is None:
            search_paths = [Path.cwd() / name for name in self.DEFAULT_FILE_NAMES]
            search_paths.append(Path.home() / ".config" / "pattern-catalog" / "config.yaml")
        self.search_paths = search_paths

    def find_config_file(self) -> Optional[Path]:
        """Find the configuration file to use, if any."""
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            path = Path(env_path).expanduser()
            if not path.exists():
                raise ConfigurationError(f"Configuration file not found: {path}")
            return path

        for candidate in self.search_paths:
            if candidate.is_file():
                return candidate
        return None

    def load_from_file(self, config_path: str) -> Dict[str, Any]:
        """Load configuration from a YAML or JSON file."""
        path = Path(config_path).expanduser()
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix in (".yaml", ".yml"):
                    data = yaml.safe_load(f) or {}
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Invalid configuration file format in {path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Error reading configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")

        logger.debug("Loaded configuration from %s", path)
        return data

    def load_configuration(self, config_path: Optional[str] = None) -> Dict[str, Any]:
        """Load configuration from the explicit path or the default locations."""
        if config_path:
            data = self.load_from_file(config_path)
        else:
            found = self.find_config_file()
            data = self.load_from_file(str(found)) if found else {}
        return expand_config_env_vars(data)

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply PATTERN_CATALOG_* environment variable overrides."""
        result = {key: (dict(value) if isinstance(value, dict) else value)
                  for key, value in config_data.items()}

        for suffix, (section, key, converter) in ENV_OVERRIDES.items():
            raw = os.environ.get(f"{ENV_PREFIX}{suffix}")
            if raw is None:
                continue
            current = result.get(section)
            if current is not None and not isinstance(current, dict):
                # left for schema validation to reject
                continue
            target = result[section] = dict(current or {})
            *parents, leaf = key.split(".")
            for parent in parents:
                nested = target.get(parent)
                target[parent] = dict(nested) if isinstance(nested, dict) else {}
                target = target[parent]
            target[leaf] = converter(raw)
            logger.debug("Applied environment override %s%s", ENV_PREFIX, suffix)

        return result
