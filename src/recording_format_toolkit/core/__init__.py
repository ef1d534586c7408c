"""Core abstractions and catalog data for the recording format toolkit."""

from .base import FormatToolkitError, RecordingConfiguration, SizeConstraint, UnknownCombinationError
from .catalog import (
    FORMAT_SPECS,
    PLATFORMS,
    AudioFormat,
    AudioQuality,
    FormatSpec,
    PlatformCapabilities,
    byte_cost_per_minute,
    get_platform,
    supported_formats,
)
from .config import ConfigManager, SelectionOptions, with_config_overrides
from .profiles import RecordingTypeProfile, resolve_profile

__all__ = [
    "FORMAT_SPECS",
    "PLATFORMS",
    "AudioFormat",
    "AudioQuality",
    "ConfigManager",
    "FormatSpec",
    "FormatToolkitError",
    "PlatformCapabilities",
    "RecordingConfiguration",
    "RecordingTypeProfile",
    "SelectionOptions",
    "SizeConstraint",
    "UnknownCombinationError",
    "byte_cost_per_minute",
    "get_platform",
    "resolve_profile",
    "supported_formats",
    "with_config_overrides",
]
