"""Configuration management for the dosdt tool.

Handles saving and loading user preferences: the default validation mode
of the encoder and whether output is JSON by default.
"""

import copy
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

import tomli_w

from .models import ValidationMode


def get_config_dir() -> Path:
    """Get the configuration directory.

    Returns:
        Path to config directory (~/.dosdt on all platforms)
    """
    config_dir = Path.home() / ".dosdt"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_path() -> Path:
    """Get the full path to the config file."""
    return get_config_dir() / "config.toml"


class Config:
    """Configuration manager for application settings."""

    DEFAULT_CONFIG: Dict[str, Any] = {
        "codec": {
            # "strict" rejects out-of-range fields, "loose" packs them like
            # the legacy tool and lets bits alias
            "mode": ValidationMode.STRICT.value,
        },
        "output": {
            "json": False,
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_path: Explicit config file; defaults to ~/.dosdt/config.toml
        """
        self.config_path = Path(config_path) if config_path else get_config_path()
        self.data: Dict[str, Any] = copy.deepcopy(self.DEFAULT_CONFIG)
        self._dirty = False
        self.load()

    def load(self) -> bool:
        """Load configuration from file.

        Returns:
            True if loaded successfully, False if file doesn't exist or error occurred
        """
        if not self.config_path.exists():
            return False

        try:
            with open(self.config_path, "rb") as f:
                loaded_data = tomllib.load(f)
            self._merge_config(self.data, loaded_data)
            self._dirty = False
            logging.debug("Loaded configuration from %s", self.config_path)
            return True
        except (OSError, tomllib.TOMLDecodeError) as e:
            logging.warning("Error loading config %s: %s", self.config_path, e)
            return False

    def save(self, force: bool = False) -> bool:
        """Save configuration to file.

        Args:
            force: If True, save even if config hasn't been modified

        Returns:
            True if saved successfully, False otherwise
        """
        if not force and not self._dirty:
            return True

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "wb") as f:
                tomli_w.dump(self.data, f)
            self._dirty = False
            return True
        except OSError as e:
            logging.warning("Error saving config %s: %s", self.config_path, e)
            return False

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Recursively merge override dict into base dict."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def is_dirty(self) -> bool:
        """Check if configuration has been modified."""
        return self._dirty

    # Codec settings
    def get_mode(self) -> ValidationMode:
        """Get the default validation mode.

        Unknown values in the file fall back to strict.
        """
        value = self.data.get("codec", {}).get("mode", ValidationMode.STRICT.value)
        try:
            return ValidationMode(value)
        except ValueError:
            logging.warning("Unknown codec mode %r in config, using strict", value)
            return ValidationMode.STRICT

    def set_mode(self, mode: ValidationMode | str) -> None:
        """Set the default validation mode.

        Raises:
            ValueError: If mode is not "strict" or "loose"
        """
        mode = ValidationMode(mode)
        self.data.setdefault("codec", {})["mode"] = mode.value
        self._dirty = True

    # Output settings
    def get_json_output(self) -> bool:
        """Whether commands print JSON unless told otherwise."""
        return bool(self.data.get("output", {}).get("json", False))

    def set_json_output(self, enabled: bool) -> None:
        self.data.setdefault("output", {})["json"] = bool(enabled)
        self._dirty = True
