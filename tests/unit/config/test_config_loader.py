"""Tests for configuration loading, schemas and the configuration manager."""
import json
import os
from unittest.mock import patch

import pytest
import yaml

from pattern_catalog.config import (
    AppConfig,
    ConfigurationLoader,
    ConfigurationManager,
    LintConfig,
    LoggingConfig,
    validate_config,
)
from pattern_catalog.domain.base.exceptions import ConfigurationError


class TestConfigurationLoader:
    """Test reading configuration files and environment overrides."""

    def setup_method(self):
        self.loader = ConfigurationLoader(search_paths=[])

    def test_load_yaml_file(self, tmp_path):
        """Test loading a YAML configuration file."""
        path = tmp_path / "pattern-catalog.yaml"
        path.write_text(yaml.safe_dump({"lint": {"strict": True}}))
        assert self.loader.load_from_file(str(path)) == {"lint": {"strict": True}}

    def test_load_json_file(self, tmp_path):
        """Test loading a JSON configuration file."""
        path = tmp_path / "pattern-catalog.json"
        path.write_text(json.dumps({"catalog": {"title": "Patterns"}}))
        assert self.loader.load_from_file(str(path)) == {"catalog": {"title": "Patterns"}}

    def test_empty_yaml_file(self, tmp_path):
        """Test that an empty file loads as an empty mapping."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert self.loader.load_from_file(str(path)) == {}

    def test_missing_file(self, tmp_path):
        """Test that a missing file is a configuration error."""
        with pytest.raises(ConfigurationError, match="not found"):
            self.loader.load_from_file(str(tmp_path / "missing.yaml"))

    def test_invalid_yaml(self, tmp_path):
        """Test that malformed YAML is a configuration error."""
        path = tmp_path / "bad.yaml"
        path.write_text("lint: [unclosed")
        with pytest.raises(ConfigurationError, match="Invalid configuration file format"):
            self.loader.load_from_file(str(path))

    def test_non_mapping(self, tmp_path):
        """Test that a top-level list is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            self.loader.load_from_file(str(path))

    def test_search_paths(self, tmp_path):
        """Test that the first existing search path is used."""
        found = tmp_path / "second.yaml"
        found.write_text("{}")
        loader = ConfigurationLoader(search_paths=[tmp_path / "first.yaml", found])
        assert loader.find_config_file() == found

    def test_config_env_var_wins(self, tmp_path):
        """Test that PATTERN_CATALOG_CONFIG selects the file."""
        path = tmp_path / "custom.yaml"
        path.write_text("{}")
        with patch.dict(os.environ, {"PATTERN_CATALOG_CONFIG": str(path)}):
            assert self.loader.find_config_file() == path

    def test_config_env_var_missing_file(self, tmp_path):
        """Test that PATTERN_CATALOG_CONFIG must point at an existing file."""
        with patch.dict(os.environ, {"PATTERN_CATALOG_CONFIG": str(tmp_path / "nope.yaml")}):
            with pytest.raises(ConfigurationError):
                self.loader.find_config_file()

    def test_no_file_gives_empty_config(self):
        """Test that no configuration file means an empty mapping."""
        assert self.loader.load_configuration() == {}

    def test_file_values_are_expanded(self, tmp_path):
        """Test that environment variables in file values are expanded."""
        path = tmp_path / "pattern-catalog.yaml"
        path.write_text("catalog:\n  data_dir: \"${CATALOG_DATA_TEST:/srv/data}\"\n")
        assert self.loader.load_configuration(str(path)) == {"catalog": {"data_dir": "/srv/data"}}

    def test_environment_overrides(self):
        """Test typed PATTERN_CATALOG_* overrides."""
        env = {
            "PATTERN_CATALOG_LOG_LEVEL": "DEBUG",
            "PATTERN_CATALOG_STRICT": "yes",
            "PATTERN_CATALOG_DISABLED_RULES": "code004, sec003",
            "PATTERN_CATALOG_INCLUDE_STUBS": "false",
            "PATTERN_CATALOG_LOG_FILE": "/tmp/catalog.log",
        }
        with patch.dict(os.environ, env):
            result = self.loader.apply_environment_overrides({"lint": {"strict": False}})

        assert result["logging"]["level"] == "DEBUG"
        assert result["logging"]["file"] == {"path": "/tmp/catalog.log"}
        assert result["lint"] == {"strict": True, "disabled_rules": ["code004", "sec003"]}
        assert result["catalog"]["include_stubs"] is False

    def test_overrides_do_not_mutate_input(self):
        """Test that the original mapping is left alone."""
        original = {"lint": {"strict": False}}
        with patch.dict(os.environ, {"PATTERN_CATALOG_STRICT": "1"}):
            self.loader.apply_environment_overrides(original)
        assert original == {"lint": {"strict": False}}

    def test_overrides_fill_empty_section(self):
        """Test that an override lands in a section left empty in the file."""
        with patch.dict(os.environ, {"PATTERN_CATALOG_TITLE": "Catalogue",
                                     "PATTERN_CATALOG_LOG_FILE": "/tmp/catalog.log"}):
            result = self.loader.apply_environment_overrides({"catalog": None,
                                                              "logging": {"file": None}})
        assert result["catalog"] == {"title": "Catalogue"}
        assert result["logging"] == {"file": {"path": "/tmp/catalog.log"}}

    def test_overrides_skip_non_mapping_section(self):
        """Test that a malformed section is left for schema validation."""
        with patch.dict(os.environ, {"PATTERN_CATALOG_TITLE": "Catalogue"}):
            result = self.loader.apply_environment_overrides({"catalog": "oops"})
        assert result == {"catalog": "oops"}
        with pytest.raises(ConfigurationError):
            validate_config(result)


class TestConfigSchemas:
    """Test configuration validation."""

    def test_defaults(self):
        """Test the default configuration."""
        config = AppConfig()
        assert config.logging.level == "WARNING"
        assert config.lint.toc_levels == [2, 3]
        assert config.catalog.include_stubs is True
        assert config.events.mode == "logging"

    def test_empty_sections_use_defaults(self):
        """Test that sections left empty in a file fall back to their defaults."""
        config = validate_config({"catalog": None, "lint": {"strict": True}})
        assert config.catalog.include_stubs is True
        assert config.lint.strict is True

    def test_invalid_values_raise_configuration_error(self):
        """Test that schema errors become configuration errors naming the field."""
        with pytest.raises(ConfigurationError) as exc_info:
            validate_config({"logging": {"level": "LOUD"}})
        assert "logging.level" in exc_info.value.message

    def test_log_level_is_upper_cased(self):
        """Test that log levels are case-insensitive."""
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_lint_rules_normalised(self):
        """Test that disabled rules are upper-cased and levels de-duplicated."""
        config = LintConfig(disabled_rules=[" code004 ", ""], toc_levels=[3, 2, 3])
        assert config.disabled_rules == ["CODE004"]
        assert config.toc_levels == [2, 3]

    def test_toc_levels_range(self):
        """Test that heading levels must be 1 to 6."""
        with pytest.raises(ConfigurationError):
            validate_config({"lint": {"toc_levels": [0, 2]}})

    def test_repeated_category_rejected(self):
        """Test that the category order cannot repeat a category."""
        with pytest.raises(ConfigurationError, match="category_order"):
            validate_config({"catalog": {"category_order": ["creational", "creational"]}})

    def test_invalid_events_mode(self):
        """Test that only known publisher modes are accepted."""
        with pytest.raises(ConfigurationError):
            validate_config({"events": {"mode": "async"}})


class TestConfigurationManager:
    """Test the configuration manager."""

    def make_manager(self, tmp_path, content=None) -> ConfigurationManager:
        config_file = None
        if content is not None:
            path = tmp_path / "pattern-catalog.yaml"
            path.write_text(yaml.safe_dump(content))
            config_file = str(path)
        return ConfigurationManager(config_file, loader=ConfigurationLoader(search_paths=[]))

    def test_defaults_without_file(self, tmp_path):
        """Test that the manager falls back to schema defaults."""
        manager = self.make_manager(tmp_path)
        assert manager.get_lint_config().strict is False
        assert manager.config_file is None

    def test_file_values(self, tmp_path):
        """Test that file values reach the typed sections."""
        manager = self.make_manager(tmp_path, {"catalog": {"title": "My Patterns"},
                                               "lint": {"strict": True}})
        assert manager.get_catalog_config().title == "My Patterns"
        assert manager.get_lint_config().strict is True

    def test_environment_beats_file(self, tmp_path):
        """Test precedence of environment overrides over the file."""
        manager = self.make_manager(tmp_path, {"lint": {"strict": True}})
        with patch.dict(os.environ, {"PATTERN_CATALOG_STRICT": "false"}):
            assert manager.get_lint_config().strict is False

    def test_empty_section_with_environment_override(self, tmp_path):
        """Test an empty file section combined with a matching override."""
        path = tmp_path / "pattern-catalog.yaml"
        path.write_text("catalog:\nlint:\n")
        manager = ConfigurationManager(str(path), loader=ConfigurationLoader(search_paths=[]))
        with patch.dict(os.environ, {"PATTERN_CATALOG_TITLE": "Catalogue"}):
            assert manager.get_catalog_config().title == "Catalogue"
        assert manager.get_lint_config().strict is False

    def test_dotted_get(self, tmp_path):
        """Test dotted key access."""
        manager = self.make_manager(tmp_path, {"logging": {"level": "INFO"}})
        assert manager.get("logging.level") == "INFO"
        assert manager.get("logging.missing", "fallback") == "fallback"

    def test_reload(self, tmp_path):
        """Test that reload picks up file changes."""
        manager = self.make_manager(tmp_path, {"catalog": {"title": "First"}})
        assert manager.get_catalog_config().title == "First"
        (tmp_path / "pattern-catalog.yaml").write_text(yaml.safe_dump({"catalog": {"title": "Second"}}))
        assert manager.reload().catalog.title == "Second"

    def test_validate_file(self, tmp_path):
        """Test validating another file without switching to it."""
        manager = self.make_manager(tmp_path)
        other = tmp_path / "other.yaml"
        other.write_text(yaml.safe_dump({"events": {"mode": "sync"}}))
        assert manager.validate_file(str(other)).events.mode == "sync"
        assert manager.get_events_config().mode == "logging"

    def test_to_dict(self, tmp_path):
        """Test the JSON-ready configuration dump."""
        data = self.make_manager(tmp_path).to_dict()
        assert data["catalog"]["category_order"] == ["creational", "structural", "behavioral"]
