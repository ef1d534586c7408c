"""Configuration management for the recording format toolkit."""

from __future__ import annotations

from .constants import *  # noqa: F403, F401
from .settings import FormatToolkitConfig, ProfileSettings, get_config

__all__ = [
    "FormatToolkitConfig",
    "ProfileSettings",
    "get_config",
]
