"""Configuration management for the recording format toolkit."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .constants import DEFAULT_CONFIG_FILENAME, DEFAULT_PLATFORM, DEFAULT_RECORDING_TYPE

LOG = logging.getLogger(__name__)


# Configuration singleton
class _ConfigSingleton:
    """Configuration singleton holder."""

    _instance: FormatToolkitConfig | None = None

    @classmethod
    def get_instance(cls) -> FormatToolkitConfig:
        """Get the configuration instance."""
        if cls._instance is None:
            # Try to load from default config file (look in working directory)
            config_path = Path.cwd() / DEFAULT_CONFIG_FILENAME
            if config_path.exists():
                cls._instance = FormatToolkitConfig.load_from_file(config_path)
            else:
                cls._instance = FormatToolkitConfig()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the configuration instance."""
        cls._instance = None


_config_singleton = _ConfigSingleton()


@dataclass(frozen=True)
class ProfileSettings:
    """Recording-type profile as written in config.yaml."""

    quality: str
    channels: int
    noise_reduction: bool = False
    auto_gain_control: bool = False
    echo_cancellation: bool = False
    description: str = ""

    def model_dump(self) -> dict[str, Any]:
        """Return dictionary representation of the profile."""
        return {
            "quality": self.quality,
            "channels": self.channels,
            "noise_reduction": self.noise_reduction,
            "auto_gain_control": self.auto_gain_control,
            "echo_cancellation": self.echo_cancellation,
            "description": self.description,
        }


@dataclass
class SelectionConfig:
    """Format selection settings."""

    platform: str = DEFAULT_PLATFORM
    default_recording_type: str = DEFAULT_RECORDING_TYPE


@dataclass
class GlobalConfig:
    """Global settings."""

    log_level: str = "WARNING"


@dataclass
class FormatToolkitConfig:
    """Main configuration class."""

    selection: SelectionConfig = field(default_factory=SelectionConfig)
    profiles: dict[str, ProfileSettings] = field(default_factory=dict)
    global_: GlobalConfig = field(default_factory=GlobalConfig)
    source: Path | None = None

    @classmethod
    def load_from_file(cls, config_path: Path) -> FormatToolkitConfig:
        """Load configuration from YAML file."""
        try:
            with config_path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}

            config = cls._from_dict(data)
        except (OSError, yaml.YAMLError) as e:
            LOG.warning("Failed to load config from %s: %s", config_path, e)
            return cls()
        else:
            config.source = config_path
            return config

    def list_profiles(self) -> list[str]:
        """Get list of profile names defined in the config file."""
        return list(self.profiles.keys())

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> FormatToolkitConfig:
        """Create config from dictionary."""
        if not isinstance(data, dict):
            LOG.warning("Ignoring config: expected a mapping at top level, got %s", type(data).__name__)
            return cls()

        selection_config = cls._parse_selection_config(data.get("selection") or {})
        profiles = cls._parse_profiles(data.get("profiles") or {})
        global_config = cls._parse_global_config(data.get("global") or {})

        return cls(selection=selection_config, profiles=profiles, global_=global_config)

    @classmethod
    def _parse_selection_config(cls, selection_data: dict[str, Any]) -> SelectionConfig:
        """Parse selection configuration."""
        platform = str(selection_data.get("platform", DEFAULT_PLATFORM)).lower()
        default_type = str(selection_data.get("default_recording_type", DEFAULT_RECORDING_TYPE))
        return SelectionConfig(platform=platform, default_recording_type=default_type)

    @classmethod
    def _parse_profiles(cls, profile_data: dict[str, Any]) -> dict[str, ProfileSettings]:
        """Parse recording-type profiles."""
        profiles = {}
        for name, entry in profile_data.items():
            try:
                if isinstance(entry, dict) and "quality" in entry and "channels" in entry:
                    profiles[str(name).lower()] = ProfileSettings(
                        quality=str(entry["quality"]).lower(),
                        channels=int(entry["channels"]),
                        noise_reduction=bool(entry.get("noise_reduction", False)),
                        auto_gain_control=bool(entry.get("auto_gain_control", False)),
                        echo_cancellation=bool(entry.get("echo_cancellation", False)),
                        description=entry.get("description", ""),
                    )
                else:
                    LOG.warning("Incomplete profile data for '%s': missing required fields", name)
            except (TypeError, ValueError) as e:
                LOG.warning("Failed to load profile '%s': %s", name, e)

        return profiles

    @classmethod
    def _parse_global_config(cls, global_data: dict[str, Any]) -> GlobalConfig:
        """Parse global configuration."""
        log_level = str(global_data.get("log_level", "WARNING")).upper()
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if log_level not in valid_levels:
            LOG.warning(
                "Invalid log level '%s'. Using 'WARNING'. Valid options: %s",
                log_level,
                ", ".join(sorted(valid_levels)),
            )
            log_level = "WARNING"

        return GlobalConfig(log_level=log_level)


def get_config() -> FormatToolkitConfig:
    """Get the global configuration instance."""
    return _config_singleton.get_instance()
