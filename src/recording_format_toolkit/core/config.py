"""Configuration manager with override and context support."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..config import FormatToolkitConfig
from ..config import get_config as _get_global_config

if TYPE_CHECKING:
    from pathlib import Path

LOG = logging.getLogger(__name__)


@dataclass
class SelectionOptions:
    """Command-line options that can override configuration."""

    platform: str | None = None
    default_recording_type: str | None = None
    verbose: bool = False


class ConfigManager:
    """Configuration manager with dot-path overrides and a context stack."""

    def __init__(self, config_path: Path | None = None) -> None:
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to config file

        """
        self._config = FormatToolkitConfig.load_from_file(config_path) if config_path else _get_global_config()
        self._overrides: dict[str, Any] = {}
        self._context_stack: list[dict[str, Any]] = []

    @property
    def config(self) -> FormatToolkitConfig:
        """Get the base configuration."""
        return self._config

    def get_value(self, key_path: str, default: object = None) -> object:
        """Get configuration value with override support."""
        if key_path in self._overrides:
            return self._overrides[key_path]

        try:
            value = self._config
            for part in key_path.split("."):
                value = getattr(value, part)
        except AttributeError:
            return default
        else:
            return value

    def set_override(self, key_path: str, value: object) -> None:
        """Set a temporary configuration override."""
        self._overrides[key_path] = value

    def push_context(self, overrides: dict[str, Any]) -> None:
        """Push a new configuration context."""
        self._context_stack.append(self._overrides.copy())
        self._overrides.update(overrides)

    def pop_context(self) -> None:
        """Pop the current configuration context."""
        if self._context_stack:
            self._overrides = self._context_stack.pop()

    def apply_selection_options(self, options: SelectionOptions) -> None:
        """Apply command-line options as configuration overrides."""
        overrides: dict[str, Any] = {}

        if options.platform is not None:
            overrides["selection.platform"] = options.platform.lower()
        if options.default_recording_type is not None:
            overrides["selection.default_recording_type"] = options.default_recording_type

        for key, value in overrides.items():
            LOG.debug("Config override %s=%r", key, value)
            self.set_override(key, value)


class ConfigContext:
    """Context manager for temporary configuration changes."""

    def __init__(self, config_manager: ConfigManager, overrides: dict[str, Any]) -> None:
        self.config_manager = config_manager
        self.overrides = overrides

    def __enter__(self) -> ConfigManager:
        """Enter the configuration context."""
        self.config_manager.push_context(self.overrides)
        return self.config_manager

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Exit the configuration context."""
        self.config_manager.pop_context()


def with_config_overrides(config_manager: ConfigManager, **overrides: object) -> ConfigContext:
    """
    Create a context with configuration overrides.

    Keyword names use ``__`` for the dot separator, e.g.
    ``with_config_overrides(manager, selection__platform="ios")``.
    """
    return ConfigContext(config_manager, {key.replace("__", "."): value for key, value in overrides.items()})
