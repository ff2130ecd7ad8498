"""
================================================================================
Settings Loader
================================================================================

YAML-based settings for the UI suite with environment variable override.

Features:
    - Flat dotted keys (``browser.name: chrome``) or nested mappings
    - Environment variable override (BROWSER_NAME overrides browser.name)
    - Typed accessors with safe fallback parsing
    - Fixed default set when the settings file cannot be loaded

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import yaml
from loguru import logger

from .results import SoftResult


# Default settings file path: <repo>/config/config.yaml
DEFAULT_SETTINGS_PATH = Path(__file__).parent.parent.parent.parent / "config" / "config.yaml"

# Environment variable pointing at an alternative settings file
SETTINGS_FILE_ENV = "UI_SETTINGS_FILE"

DEFAULT_SCREENSHOT_PATH = "screenshots/"

# Used only when the settings file cannot be loaded
DEFAULT_SETTINGS: Dict[str, str] = {
    "browser.name": "chrome",
    "browser.headless": "false",
    "browser.window.maximize": "true",
    "base.url": "https://demoqa.com",
    "implicit.wait": "10",
    "explicit.wait": "20",
    "page.load.timeout": "30",
}


class ConfigurationError(Exception):
    """Raised when the configured values cannot be used."""
    pass


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _flatten(data: Mapping[str, Any], prefix: str = "") -> Dict[str, str]:
    """Flatten nested mappings into dotted keys with string values."""
    flat: Dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(_flatten(value, prefix=f"{full_key}."))
        elif value is not None:
            flat[full_key] = _stringify(value)
    return flat


def env_key_for(key: str) -> str:
    """Environment variable name overriding a dotted settings key."""
    return key.upper().replace(".", "_")


class Settings:
    """
    Immutable key/value settings for browser and suite configuration.

    Lookup order (highest to lowest priority):
        1. Environment variables (BROWSER_NAME for browser.name)
        2. Loaded settings file, or DEFAULT_SETTINGS if loading failed
        3. Caller-supplied default

    Usage:
        >>> settings = Settings.load()
        >>> settings.get_property("browser.name", "chrome")
        'chrome'
        >>> settings.get_int_property("implicit.wait")
        10
    """

    def __init__(
        self,
        values: Mapping[str, str],
        load_result: Optional[SoftResult] = None,
    ) -> None:
        self._values = MappingProxyType(dict(values))
        if load_result is None:
            load_result = SoftResult.success("in-memory")
        self.load_result = load_result

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        """
        Load settings from a YAML file.

        Never raises: any failure is logged and the default set is used.

        Args:
            path: Settings file. Defaults to $UI_SETTINGS_FILE or
                  DEFAULT_SETTINGS_PATH.
        """
        if path is None:
            path = Path(os.environ.get(SETTINGS_FILE_ENV, DEFAULT_SETTINGS_PATH))
        path = Path(path)

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, Mapping):
                raise ConfigurationError(
                    f"Settings file must contain a mapping, got {type(data).__name__}"
                )
        except (OSError, yaml.YAMLError, ConfigurationError) as e:
            logger.warning(
                f"Error loading settings file {path}: {e}. Using default settings."
            )
            return cls(DEFAULT_SETTINGS, SoftResult.degraded(str(e), value=str(path)))

        logger.debug(f"Loaded settings from: {path}")
        return cls(_flatten(data), SoftResult.success(str(path)))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "Settings":
        """Build settings from an in-memory (possibly nested) mapping."""
        return cls(_flatten(mapping))

    # =========================================================================
    # Accessors
    # =========================================================================

    def get_property(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get a setting value.

        Args:
            key: Dotted key (e.g., "browser.name")
            default: Returned when the key is absent everywhere

        Returns:
            The string value or default
        """
        env_value = os.environ.get(env_key_for(key))
        if env_value is not None:
            return env_value
        return self._values.get(key, default)

    def get_int_property(self, key: str) -> int:
        """Integer setting; absent or non-numeric values yield 0."""
        try:
            return int(self.get_property(key, "0").strip())
        except ValueError:
            return 0

    def get_bool_property(self, key: str) -> bool:
        """Boolean setting; only "true" (any case) is True."""
        return self.get_property(key, "false").strip().lower() == "true"

    def as_dict(self) -> Dict[str, str]:
        """Stored values, without environment overrides."""
        return dict(self._values)

    def __contains__(self, key: str) -> bool:
        return key in self._values

    # =========================================================================
    # Convenience Properties
    # =========================================================================

    @property
    def browser_name(self) -> str:
        return self.get_property("browser.name", "chrome").strip().lower()

    @property
    def base_url(self) -> Optional[str]:
        return self.get_property("base.url")

    @property
    def test_url(self) -> Optional[str]:
        return self.get_property("test.url", self.base_url)

    @property
    def implicit_wait(self) -> int:
        return self.get_int_property("implicit.wait")

    @property
    def explicit_wait(self) -> int:
        return self.get_int_property("explicit.wait")

    @property
    def page_load_timeout(self) -> int:
        return self.get_int_property("page.load.timeout")

    @property
    def screenshot_path(self) -> str:
        return self.get_property("screenshot.path", DEFAULT_SCREENSHOT_PATH)

    def __repr__(self) -> str:
        return f"Settings(source={self.load_result.value!r}, keys={len(self._values)})"


# Process-wide settings, loaded once on first use
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first call."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reset_settings() -> None:
    """
    Discard the process-wide settings.

    Useful for testing when settings need to be reloaded from a
    different file.
    """
    global _settings
    _settings = None


__all__ = [
    "ConfigurationError",
    "DEFAULT_SETTINGS",
    "DEFAULT_SETTINGS_PATH",
    "Settings",
    "env_key_for",
    "get_settings",
    "reset_settings",
]
