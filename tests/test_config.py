"""Tests for settings file discovery, loading and validation."""

import dataclasses
import logging

import pytest

from ckconv.config import (
    DEFAULT_COLORS,
    Settings,
    apply_overrides,
    load_settings,
    settings_from_dict,
)
from ckconv.utils.errors import ConfigError
from ckconv.utils.fileio import find_config_file, load_yaml_file


@pytest.fixture
def write_config(tmp_path):
    """Write YAML text to a settings file and return its path."""
    def _write(text, name="ckconv.yaml"):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _write


class TestFindConfigFile:
    """Test settings file search priority"""

    def test_nothing_found(self):
        assert find_config_file() is None

    def test_explicit_path_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CKCONV_CONFIG", str(tmp_path / "env.yaml"))
        assert find_config_file(tmp_path / "explicit.yaml") == tmp_path / "explicit.yaml"

    def test_environment_variable(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CKCONV_CONFIG", str(tmp_path / "env.yaml"))
        assert find_config_file() == tmp_path / "env.yaml"

    def test_default_location(self, isolated_config):
        default = isolated_config / ".config" / "ckconv" / "ckconv.yaml"
        default.parent.mkdir(parents=True)
        default.write_text("quiet: true\n")
        assert find_config_file() == default


class TestLoadYamlFile:
    """Test YAML file loading"""

    def test_load(self, write_config):
        assert load_yaml_file(write_config("precision: 4\n")) == {"precision": 4}

    def test_empty_file(self, write_config):
        assert load_yaml_file(write_config("")) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_yaml_file(tmp_path / "missing.yaml")


class TestLoadSettings:
    """Test building Settings from a file"""

    def test_defaults_without_file(self):
        settings = load_settings()
        assert settings == Settings()
        assert settings.notation == "general"
        assert settings.precision is None
        assert settings.color is True

    def test_values_from_file(self, write_config):
        path = write_config(
            "full_name: true\n"
            "precision: 4\n"
            "align_to: 20\n"
            "notation: Fixed\n"
            "quiet: true\n"
            "color: false\n"
        )
        settings = load_settings(path)
        assert settings.full_name is True
        assert settings.precision == 4
        assert settings.align_to == 20
        assert settings.notation == "fixed"
        assert settings.quiet is True
        assert settings.color is False

    def test_environment_file(self, write_config, monkeypatch):
        monkeypatch.setenv("CKCONV_CONFIG", str(write_config("precision: 2\n")))
        assert load_settings().precision == 2

    def test_empty_file_gives_defaults(self, write_config):
        assert load_settings(write_config("")) == Settings()

    def test_colors_merged_over_defaults(self, write_config):
        settings = load_settings(write_config("colors:\n  result: bold green\n"))
        assert settings.style("result") == "bold green"
        assert settings.style("input") == DEFAULT_COLORS["input"]

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_settings(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, write_config):
        with pytest.raises(ConfigError, match="Could not read settings"):
            load_settings(write_config("precision: [4\n"))


class TestSettingsValidation:
    """Test type and value checks on settings"""

    def test_unknown_key_is_ignored(self, caplog):
        with caplog.at_level(logging.WARNING, logger="ckconv.config"):
            settings = settings_from_dict({"precison": 4})
        assert settings == Settings()
        assert "precison" in caplog.text

    def test_unknown_color_role_is_ignored(self, caplog):
        with caplog.at_level(logging.WARNING, logger="ckconv.config"):
            settings = settings_from_dict({"colors": {"sparkle": "magenta"}})
        assert "sparkle" not in settings.colors
        assert "sparkle" in caplog.text

    @pytest.mark.parametrize("data", [
        {"precision": "four"},
        {"precision": True},
        {"align_to": 2.5},
        {"quiet": 1},
        {"full_name": "yes"},
        {"colors": ["red"]},
    ])
    def test_wrong_type(self, data):
        with pytest.raises(ConfigError):
            settings_from_dict(data)

    def test_negative_precision(self):
        with pytest.raises(ConfigError, match="negative"):
            settings_from_dict({"precision": -1})

    def test_bad_notation(self):
        with pytest.raises(ConfigError, match="notation"):
            settings_from_dict({"notation": "roman"})

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError, match="mapping"):
            settings_from_dict(["precision", 4])

    def test_null_precision_allowed(self):
        assert settings_from_dict({"precision": None}).precision is None


class TestApplyOverrides:
    """Test command-line overrides"""

    def test_none_means_not_given(self):
        base = Settings(precision=4)
        assert apply_overrides(base, precision=None, quiet=None) is base

    def test_values_override(self):
        settings = apply_overrides(Settings(precision=4, color=True), precision=2, color=False)
        assert settings.precision == 2
        assert settings.color is False

    def test_settings_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Settings().quiet = True
