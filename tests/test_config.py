"""Tests for the configuration system."""

import pytest

from text_fusion.utils.config import Config, ConfigError


class TestConfig:
    """Test the Config class functionality."""

    def test_config_defaults(self, monkeypatch):
        for key in ("FUSION_STATUS_HEIGHT", "FUSION_PANE_SPACING", "FUSION_THEME", "FUSION_PLACEHOLDER"):
            monkeypatch.delenv(key, raising=False)

        config = Config()
        assert config.status_height == 3
        assert config.pane_spacing == 2
        assert config.theme == "fusion-dark"
        assert config.placeholder == "Enter text here..."

    def test_config_environment_variables(self, monkeypatch):
        monkeypatch.setenv("FUSION_STATUS_HEIGHT", "5")
        monkeypatch.setenv("FUSION_PANE_SPACING", "0")
        monkeypatch.setenv("FUSION_THEME", "fusion-light")
        monkeypatch.setenv("FUSION_PLACEHOLDER", "Paste here")

        config = Config()
        assert config.status_height == 5
        assert config.pane_spacing == 0
        assert config.theme == "fusion-light"
        assert config.placeholder == "Paste here"

    def test_config_invalid_integer_falls_back(self, monkeypatch):
        monkeypatch.setenv("FUSION_STATUS_HEIGHT", "tall")

        config = Config()
        assert config.status_height == 3

    def test_blank_string_falls_back(self, monkeypatch):
        monkeypatch.setenv("FUSION_THEME", "   ")

        config = Config()
        assert config.theme == "fusion-dark"

    def test_config_out_of_bounds_raises(self, monkeypatch):
        monkeypatch.setenv("FUSION_PANE_SPACING", "50")

        with pytest.raises(ConfigError, match="pane_spacing must be between"):
            Config()

    def test_config_validation_types(self, monkeypatch):
        monkeypatch.delenv("FUSION_STATUS_HEIGHT", raising=False)
        config = Config()
        with pytest.raises(ConfigError, match="status_height must be an integer"):
            config.status_height = "3"
            config._validate_all()

    def test_config_boundary_values(self, monkeypatch):
        monkeypatch.setenv("FUSION_STATUS_HEIGHT", "1")
        monkeypatch.setenv("FUSION_PANE_SPACING", "10")

        config = Config()
        assert config.status_height == 1
        assert config.pane_spacing == 10

    def test_config_repr(self, monkeypatch):
        monkeypatch.delenv("FUSION_STATUS_HEIGHT", raising=False)
        repr_str = repr(Config())

        assert "Config(" in repr_str
        assert "status_height=3" in repr_str
