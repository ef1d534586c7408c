"""Utility CLI commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...core.catalog import AudioQuality
from ...core.profiles import BUILTIN_PROFILES, DEFAULT_PROFILE
from ...processors import FormatManager

if TYPE_CHECKING:
    import argparse

    from ...core import ConfigManager, RecordingTypeProfile

LOG = logging.getLogger(__name__)


class UtilityCommands:
    """Utility command handlers."""

    def __init__(self, config_manager: ConfigManager) -> None:
        """Initialize utility commands handler."""
        self.config_manager = config_manager

    def add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        """Add utility subcommands to parser."""
        subparsers = parser.add_subparsers(dest="util_command", help="Utility commands")

        # Info command
        subparsers.add_parser("info", help="Show configuration, platform and profiles")

    def handle_command(self, args: argparse.Namespace) -> int:
        """Handle utility command execution."""
        if not hasattr(args, "util_command") or args.util_command is None:
            LOG.error("No utility command specified")
            return 1

        if args.util_command == "info":
            return self._handle_info(args)
        LOG.error("Unknown utility command: %s", args.util_command)
        return 1

    def _handle_info(self, _args: argparse.Namespace) -> int:
        """Handle info display."""
        manager = FormatManager(self.config_manager)
        platform = manager.platform
        source = self.config_manager.config.source

        print(f"Config file:       {source if source else '✗ none (built-in defaults)'}")
        print(f"Platform:          {platform.name}")
        print(f"Supported formats: {', '.join(f.value for f in platform.supported_formats)}")
        print(f"Balanced format:   {platform.balanced_format.value}")
        print(f"24-bit capture:    {'yes' if platform.supports_high_bit_depth else 'no'}")
        print(f"Default type:      {self.config_manager.get_value('selection.default_recording_type')}")
        print()
        print("Quality tiers:")
        for quality in AudioQuality:
            print(f"  {quality.value:<7} {quality.sample_rate:>6}Hz {quality.bit_depth:>3}bit  {quality.description}")
        print()
        print("Recording-type profiles:")

        custom = manager.custom_profiles
        profiles: dict[str, RecordingTypeProfile] = {**BUILTIN_PROFILES, "default": DEFAULT_PROFILE, **custom}
        for name, profile in profiles.items():
            origin = "config" if name in custom else "built-in"
            flags = [
                label
                for label, enabled in (
                    ("noise reduction", profile.noise_reduction),
                    ("auto gain", profile.auto_gain_control),
                    ("echo cancellation", profile.echo_cancellation),
                )
                if enabled
            ]
            print(
                f"  {name:<10} {profile.preferred_quality.value:<7} {profile.channels}ch "
                f"{', '.join(flags) or '-':<45} ({origin})"
            )
        return 0
