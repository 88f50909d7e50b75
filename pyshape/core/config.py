"""Manages configuration for the pyshape command line.

This module loads the settings that control how validation reports are
presented. It aggregates settings from default values, TOML files and
environment variables, providing a unified interface for accessing them.
The validation engine itself takes no configuration: a compiled schema
behaves the same everywhere.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

try:
    import tomllib  # Available in Python 3.11+
except ImportError:
    import tomli as tomllib  # Fallback for Python versions < 3.11

logger = logging.getLogger(__name__)

# The default path for the user-specific global configuration file.
USER_CONFIG_PATH = Path.home() / ".config" / "pyshape" / "config.toml"
PROJECT_CONFIG_NAME = "pyshape.toml"

OUTPUT_FORMATS = ("table", "json", "md")


class Config:
    """Handles the configuration for the pyshape command line.

    This class loads configuration from multiple sources with a defined
    precedence:
    1.  Default values (lowest precedence).
    2.  Project-specific `pyshape.toml` file.
    3.  User-level `~/.config/pyshape/config.toml` file.
    4.  A custom configuration file specified at runtime.
    5.  Environment variables (highest precedence).

    Attributes:
        DEFAULT_CONFIG (Dict[str, Any]): A dictionary containing the default
            configuration values.
    """

    DEFAULT_CONFIG: Dict[str, Any] = {
        "format": "table",  # Can be "table", "json" or "md".
        "colors": True,
        "verbose": False,
        "spinner": True,
        "max_errors": 50,  # Errors shown per document; 0 shows all.
    }

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initializes the configuration manager.

        Args:
            config_path (Optional[Path]): An optional path to a specific
                configuration file to load. If provided, it takes precedence
                over default file locations.
        """
        self.config: Dict[str, Any] = dict(self.DEFAULT_CONFIG)
        self._load_config(config_path)

    def _load_config(self, config_path: Optional[Path] = None) -> None:
        if config_path:
            self._load_file_config(Path(config_path))
        else:
            self._load_default_configs()

        self._load_env_config()

    def _load_default_configs(self) -> None:
        """Loads configs from standard locations if they exist."""
        project_config = Path.cwd() / PROJECT_CONFIG_NAME
        if project_config.exists():
            self._load_file_config(project_config)

        if USER_CONFIG_PATH.exists():
            self._load_file_config(USER_CONFIG_PATH)

    def _merge_configs(self, base: Dict[str, Any], new: Dict[str, Any]) -> None:
        """Recursively merges a new config dict into a base dict."""
        for key, value in new.items():
            if isinstance(value, dict) and key in base and isinstance(base[key], dict):
                self._merge_configs(base[key], value)
            else:
                base[key] = value

    def _load_file_config(self, config_path: Path) -> None:
        """Loads and merges configuration from a TOML file.

        A `[tool.pyshape]` table is used when present, so the settings can
        also live in a `pyproject.toml`.

        Args:
            config_path (Path): The path to the TOML configuration file.
        """
        try:
            with open(config_path, "rb") as f:
                file_config = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Could not load config from {config_path}: {e}")
            return
        section = file_config.get("tool", {}).get("pyshape")
        self._merge_configs(self.config, section if isinstance(section, dict) else file_config)

    def _load_env_config(self) -> None:
        """Loads and merges configuration from environment variables."""
        env_mapping = {
            "PYSHAPE_FORMAT": "format",
            "PYSHAPE_COLORS": "colors",
            "PYSHAPE_VERBOSE": "verbose",
            "PYSHAPE_SPINNER": "spinner",
            "PYSHAPE_MAX_ERRORS": "max_errors",
        }

        for env_var, config_key in env_mapping.items():
            value = os.getenv(env_var)
            if value is not None:
                self._set_from_string(config_key, value)

    def _set_from_string(self, key: str, value: str) -> None:
        """Sets a value parsed from an environment variable string."""
        if key in ("colors", "verbose", "spinner"):
            self.config[key] = value.lower() in ("true", "1", "yes", "on")
        elif key == "max_errors":
            try:
                self.config[key] = int(value)
            except ValueError:
                logger.warning(f"Invalid integer value for {key}: {value}")
        else:
            self.config[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Retrieves a configuration value using a dot-separated key.

        Args:
            key (str): The dot-separated key (e.g., "format").
            default (Any): The default value to return if the key is not found.

        Returns:
            Any: The configuration value or the default.
        """
        value: Any = self.config
        try:
            for k in key.split("."):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any) -> None:
        """Sets a configuration value in memory."""
        keys = key.split(".")
        target_config = self.config
        for k in keys[:-1]:
            target_config = target_config.setdefault(k, {})
        target_config[keys[-1]] = value

    @property
    def output_format(self) -> str:
        """The report format, falling back to "table" for unknown values."""
        fmt = str(self.get("format", "table")).lower()
        if fmt not in OUTPUT_FORMATS:
            logger.warning(f"Unknown output format {fmt!r}, using 'table'")
            return "table"
        return fmt

    def __str__(self) -> str:
        return f"Config({self.config})"
