"""Configuration management for trackpath.

Handles saving and loading user preferences: the organize format and the
restrictions applied when cleaning rendered paths.
"""

import copy
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

import tomli_w

from .constants import DEFAULT_FORMAT
from .organize import OrganizeFormat
from .sanitize import SanitizationConfig

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the configuration directory.

    Returns:
        Path to config directory (~/.trackpath on all platforms)
    """
    return Path.home() / ".trackpath"


def get_config_path() -> Path:
    """Get the full path to the config file."""
    return get_config_dir() / "config.toml"


class Config:
    """Configuration manager for application settings."""

    DEFAULT_CONFIG: Dict[str, Any] = {
        "format": {
            "pattern": DEFAULT_FORMAT,
        },
        "sanitize": dict(SanitizationConfig()._asdict()),
        "output": {
            # Extension forced on every rendered path, without the dot.
            # Empty means: keep the extension of the source file.
            "extension": "",
        },
    }

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize configuration manager.

        Args:
            config_path: TOML file to use instead of ~/.trackpath/config.toml
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
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Error loading config %s: %s", self.config_path, e)
            return False

        # Merge with defaults (in case new keys were added)
        self._merge_config(self.data, loaded_data)
        self._dirty = False
        return True

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
        except OSError as e:
            logger.error("Error saving config %s: %s", self.config_path, e)
            return False
        self._dirty = False
        return True

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

    # Format settings
    def get_format(self) -> str:
        """Get the organize format."""
        return self.data["format"].get("pattern", DEFAULT_FORMAT)

    def set_format(self, pattern: str) -> None:
        """Save the organize format."""
        self.data["format"]["pattern"] = pattern.replace("\\", "/")
        self._dirty = True

    # Sanitize settings
    def get_sanitization_config(self) -> SanitizationConfig:
        """Get the path restrictions as a SanitizationConfig."""
        section = self.data.get("sanitize", {})
        options = SanitizationConfig()._asdict()
        for name in options:
            if name in section:
                options[name] = bool(section[name])
        return SanitizationConfig(**options)

    def set_sanitization_option(self, name: str, enabled: bool) -> None:
        """Enable or disable one path restriction.

        Raises:
            ValueError: If <name> is not a SanitizationConfig field
        """
        if name not in SanitizationConfig._fields:
            raise ValueError(f"Unknown sanitize option: {name}")
        self.data.setdefault("sanitize", {})[name] = bool(enabled)
        self._dirty = True

    # Output settings
    def get_extension(self) -> Optional[str]:
        """Get the forced extension, or None to keep the source's."""
        return self.data.get("output", {}).get("extension") or None

    def set_extension(self, extension: Optional[str]) -> None:
        """Set the forced extension ("" or None to keep the source's).

        Raises:
            ValueError: If the extension contains a path separator
        """
        extension = (extension or "").lstrip(".")
        if "/" in extension or "\\" in extension:
            raise ValueError(f"Invalid extension: {extension}")
        self.data.setdefault("output", {})["extension"] = extension
        self._dirty = True

    def build_organize_format(self) -> OrganizeFormat:
        """Create an OrganizeFormat from the current settings."""
        return OrganizeFormat(self.get_format(), self.get_sanitization_config())
