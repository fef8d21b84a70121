"""Display settings loaded from YAML and overridden by command-line flags.

Settings only steer presentation; the resolver and converter never read
them. A settings file looks like::

    full_name: true
    precision: 4
    notation: fixed      # general | fixed | scientific | hex
    align_to: 20
    quiet: false
    color: true
    colors:
      result: bold green
"""

import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ckconv.utils.errors import ConfigError
from ckconv.utils.fileio import find_config_file, load_yaml_file

logger = logging.getLogger(__name__)

NOTATIONS = ("general", "fixed", "scientific", "hex")

DEFAULT_COLORS: Dict[str, str] = {
    "input": "cyan",
    "result": "green",
    "unit": "",
    "header": "bold bright_white",
    "accent": "bright_yellow",
    "error": "red",
    "fatal": "bold red",
}


@dataclass(frozen=True)
class Settings:
    """Presentation options, passed explicitly to every display function."""

    full_name: bool = False
    precision: Optional[int] = None
    align_to: Optional[int] = None
    notation: str = "general"
    quiet: bool = False
    color: bool = True
    colors: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_COLORS))

    def style(self, role: str) -> str:
        return self.colors.get(role, "")


def _check_type(key: str, value: Any, expected: tuple, allow_none: bool = False) -> Any:
    if value is None and allow_none:
        return value
    # bool is an int subclass; keep them apart
    if isinstance(value, bool) and bool not in expected:
        raise ConfigError(f"Setting '{key}' must be {expected[0].__name__}, got {value!r}")
    if not isinstance(value, expected):
        raise ConfigError(f"Setting '{key}' must be {expected[0].__name__}, got {value!r}")
    return value


def settings_from_dict(data: Dict[str, Any], base: Optional[Settings] = None) -> Settings:
    """Validate a parsed settings mapping and merge it over ``base``.

    Raises:
        ConfigError: a known key has the wrong type or value
    """
    settings = base or Settings()
    if not isinstance(data, dict):
        raise ConfigError(f"Settings must be a mapping, got {type(data).__name__}")

    known = {f.name for f in fields(Settings)}
    changes: Dict[str, Any] = {}

    for key, value in data.items():
        if key not in known:
            logger.warning(f"Ignoring unknown setting '{key}'")
            continue

        if key in ("full_name", "quiet", "color"):
            changes[key] = _check_type(key, value, (bool,))
        elif key in ("precision", "align_to"):
            value = _check_type(key, value, (int,), allow_none=True)
            if value is not None and value < 0:
                raise ConfigError(f"Setting '{key}' must not be negative, got {value}")
            changes[key] = value
        elif key == "notation":
            value = str(value).lower()
            if value not in NOTATIONS:
                raise ConfigError(f"Setting 'notation' must be one of {', '.join(NOTATIONS)}, got {value!r}")
            changes[key] = value
        elif key == "colors":
            if not isinstance(value, dict):
                raise ConfigError("Setting 'colors' must be a mapping of role to style")
            colors = dict(settings.colors)
            for role, style in value.items():
                if role not in DEFAULT_COLORS:
                    logger.warning(f"Ignoring unknown color role '{role}'")
                    continue
                colors[role] = "" if style is None else str(style)
            changes[key] = colors

    return replace(settings, **changes)


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """Load settings from ``path`` (or the default search locations).

    Returns:
        Settings, or the defaults when no settings file applies

    Raises:
        ConfigError: the file is missing (explicit path), unreadable, or invalid
    """
    config_path = find_config_file(path)
    if config_path is None:
        return Settings()

    try:
        data = load_yaml_file(config_path)
    except FileNotFoundError as e:
        raise ConfigError(str(e)) from e
    except Exception as e:
        raise ConfigError(f"Could not read settings from {config_path}: {e}") from e

    logger.info(f"Loaded settings from {config_path}")
    return settings_from_dict(data)


def apply_overrides(settings: Settings, **overrides: Any) -> Settings:
    """Overlay command-line values; ``None`` means "not given on the command line"."""
    changes = {k: v for k, v in overrides.items() if v is not None}
    return replace(settings, **changes) if changes else settings


__all__ = [
    "NOTATIONS",
    "DEFAULT_COLORS",
    "Settings",
    "settings_from_dict",
    "load_settings",
    "apply_overrides",
]
