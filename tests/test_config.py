"""Tests for kommit.config module."""

import pytest
import yaml

from kommit.config import (
    ConfigError,
    KommitConfig,
    get_config_file_path,
    initialize_default_config,
    load_config,
    load_config_or_default,
    load_raw_config,
)
from kommit.constants import DEFAULT_TYPES


def _write_config(data):
    config_file = get_config_file_path()
    config_file.parent.mkdir(parents=True, exist_ok=True)
    with open(config_file, "w") as f:
        yaml.dump(data, f)


class TestGetConfigFilePath:
    """Tests for get_config_file_path function."""

    def test_returns_correct_path(self, config_dir):
        """Test that correct config path is returned."""
        config_file = get_config_file_path()
        assert config_file.name == "config.yaml"
        assert config_file.parent == config_dir


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults_when_missing(self, config_dir):
        """Test that defaults are used when there is no file."""
        config = load_config()

        assert config.types == DEFAULT_TYPES
        assert config.scope_history_limit == 200
        assert config.message_history_limit == 10

    def test_does_not_create_file(self, config_dir):
        """Test that loading never writes the config file."""
        load_config()
        assert not get_config_file_path().exists()

    def test_loads_existing_config(self, config_dir):
        """Test loading values from the file."""
        _write_config({"types": ["feat", "hotfix"], "scope_history_limit": 50})

        config = load_config()

        assert config.types == ["feat", "hotfix"]
        assert config.scope_history_limit == 50
        assert config.message_history_limit == 10

    def test_ignores_unknown_keys(self, config_dir):
        """Test that unrelated keys don't break loading."""
        _write_config({"editor": "vim"})

        assert load_config().types == DEFAULT_TYPES

    def test_strips_blank_types(self, config_dir):
        """Test that blank type entries are dropped."""
        _write_config({"types": [" feat ", "", "fix"]})

        assert load_config().types == ["feat", "fix"]

    def test_rejects_non_positive_limit(self, config_dir):
        """Test that a zero limit is invalid."""
        _write_config({"message_history_limit": 0})

        with pytest.raises(ConfigError) as exc_info:
            load_config()

        assert "Invalid config" in str(exc_info.value)

    def test_rejects_empty_types(self, config_dir):
        """Test that an empty type list is invalid."""
        _write_config({"types": []})

        with pytest.raises(ConfigError):
            load_config()

    def test_corrupted_yaml(self, config_dir):
        """Test handling of a corrupted config file."""
        config_file = get_config_file_path()
        config_file.parent.mkdir(parents=True, exist_ok=True)
        config_file.write_text("invalid: yaml: content: [")

        with pytest.raises(ConfigError) as exc_info:
            load_raw_config()

        assert "Failed to load config" in str(exc_info.value)

    def test_non_mapping_yaml(self, config_dir):
        """Test that a YAML list is rejected."""
        _write_config(["feat", "fix"])

        with pytest.raises(ConfigError):
            load_config()


class TestLoadConfigOrDefault:
    """Tests for load_config_or_default function."""

    def test_falls_back_on_error(self, config_dir):
        """Test that an invalid file gives the defaults."""
        _write_config({"scope_history_limit": -1})

        assert load_config_or_default() == KommitConfig()

    def test_uses_valid_file(self, config_dir):
        """Test that a valid file is used."""
        _write_config({"scope_history_limit": 500})

        assert load_config_or_default().scope_history_limit == 500


class TestInitializeDefaultConfig:
    """Tests for initialize_default_config function."""

    def test_creates_file_with_defaults(self, config_dir):
        """Test that defaults are written to a new file."""
        assert initialize_default_config() is True

        with open(get_config_file_path()) as f:
            data = yaml.safe_load(f)

        assert data["types"] == DEFAULT_TYPES
        assert data["scope_history_limit"] == 200
        assert data["message_history_limit"] == 10

    def test_keeps_existing_file(self, config_dir):
        """Test that an existing file is left alone."""
        _write_config({"types": ["feat"]})

        assert initialize_default_config() is False
        assert load_config().types == ["feat"]
