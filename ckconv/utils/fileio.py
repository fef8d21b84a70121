"""
File Utility Functions
----------------------

Small helpers for reading the settings file and locating it on disk.

Functions:
  - load_yaml_file: Load and parse a YAML file
  - find_config_file: Locate the settings file by flag, env var, or default path
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CKCONV_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/ckconv/ckconv.yaml")


def load_yaml_file(path: Path) -> dict:
    """
    Load and parse YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Parsed YAML data as dictionary (empty for an empty file)

    Raises:
        FileNotFoundError: If file does not exist

    Examples:
        >>> data = load_yaml_file(Path("ckconv.yaml"))
        >>> data['precision']
        4
    """
    import yaml

    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    with open(path, 'r') as f:
        return yaml.safe_load(f) or {}


def find_config_file(explicit: Optional[Union[str, Path]] = None) -> Optional[Path]:
    """Find the settings file.

    Search priority:
    1. Explicit path (``--config``); returned even if missing so the caller can report it
    2. ``CKCONV_CONFIG`` environment variable
    3. ``~/.config/ckconv/ckconv.yaml`` if it exists

    Returns:
        Path to use, or None when no settings file applies
    """
    if explicit:
        return Path(explicit).expanduser()

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        logger.debug(f"Using settings from {CONFIG_ENV_VAR}: {env_path}")
        return Path(env_path).expanduser()

    default = DEFAULT_CONFIG_PATH.expanduser()
    if default.exists():
        return default

    logger.debug(f"No settings file at {default}, using defaults")
    return None


__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "load_yaml_file",
    "find_config_file",
]
