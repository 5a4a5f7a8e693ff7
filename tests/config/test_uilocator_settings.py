"""Tests for environment-driven settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from uilocator.config import MAX_TREE_DEPTH_LIMIT, UILocatorSettings, get_settings, reset_settings


class TestUILocatorSettings:
    """Test defaults and UILOCATOR_ environment overrides."""

    def test_defaults(self):
        """Test default values."""
        settings = UILocatorSettings()

        assert settings.config_name == "ui_config"
        assert settings.config_file is None
        assert settings.config_search_paths == []
        assert settings.max_tree_depth == 200
        assert settings.log_level == "INFO"
        assert settings.structured_logs is False

    def test_environment_overrides(self, monkeypatch):
        """Test that prefixed variables are read, case-insensitively."""
        monkeypatch.setenv("UILOCATOR_CONFIG_NAME", "apps")
        monkeypatch.setenv("UILOCATOR_CONFIG_FILE", "/etc/uilocator/apps.yaml")
        monkeypatch.setenv("uilocator_max_tree_depth", "50")

        settings = UILocatorSettings()

        assert settings.config_name == "apps"
        assert settings.config_file == Path("/etc/uilocator/apps.yaml")
        assert settings.max_tree_depth == 50

    @pytest.mark.parametrize("depth", ["0", str(MAX_TREE_DEPTH_LIMIT + 1), "5000"])
    def test_invalid_depth(self, monkeypatch, depth):
        """Test that a depth limit outside 1..MAX_TREE_DEPTH_LIMIT is rejected."""
        monkeypatch.setenv("UILOCATOR_MAX_TREE_DEPTH", depth)

        with pytest.raises(ValidationError):
            UILocatorSettings()

    def test_singleton(self, monkeypatch):
        """Test that get_settings caches until reset."""
        first = get_settings()
        assert get_settings() is first

        monkeypatch.setenv("UILOCATOR_CONFIG_NAME", "apps")
        assert get_settings().config_name == "ui_config"

        reset_settings()
        assert get_settings().config_name == "apps"
