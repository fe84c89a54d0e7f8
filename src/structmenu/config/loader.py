"""Configuration file loader."""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from ..errors import ConfigError
from .settings import MenuSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/structmenu.yaml")


def _expand_env_vars(obj):
    """Recursively expand ${VAR} patterns in strings."""
    if isinstance(obj, str):
        if obj.startswith("${") and obj.endswith("}"):
            var_name = obj[2:-1]
            return os.environ.get(var_name, "")
        return obj
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    return obj


def load_settings(
    config_path: Optional[Path] = None,
    env_path: Optional[Path] = None,
) -> MenuSettings:
    """Load menu settings from a YAML file and the environment.

    The file may either hold the settings at the top level or under a
    ``menu:`` key. Missing files fall back to the defaults.

    Args:
        config_path: Path to the YAML file (default: config/structmenu.yaml)
        env_path: Path to a .env file (default: .env)

    Returns:
        Validated MenuSettings instance

    Raises:
        ConfigError: If the file is not valid YAML or fails validation.
    """
    if env_path is None:
        env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)

    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    config_data = {}
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(str(config_path), str(e)) from e
        logger.debug("Loaded menu config from %s", config_path)
    else:
        logger.debug("No menu config at %s, using defaults", config_path)

    if not isinstance(config_data, dict):
        raise ConfigError(str(config_path), "top level must be a mapping")
    if "menu" in config_data:
        config_data = config_data["menu"] or {}
        if not isinstance(config_data, dict):
            raise ConfigError(str(config_path), "'menu' must be a mapping")

    config_data = _expand_env_vars(config_data)

    try:
        return MenuSettings(**config_data)
    except ValidationError as e:
        raise ConfigError(str(config_path), str(e)) from e
