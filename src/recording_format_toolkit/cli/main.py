"""Main CLI interface for the recording format toolkit."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ..config.constants import VERBOSE_LOGGING_THRESHOLD
from ..core import PLATFORMS, ConfigManager, FormatToolkitError, SelectionOptions, with_config_overrides
from .commands import AudioCommands, UtilityCommands


class FormatToolkitCLI:
    """Main CLI interface."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_manager = ConfigManager(config_path)
        self.audio_commands = AudioCommands(self.config_manager)
        self.utility_commands = UtilityCommands(self.config_manager)

    @staticmethod
    def setup_logging(verbosity: int, base_level: str = "WARNING") -> None:
        """Setup logging based on verbosity level; ``base_level`` applies without -v."""
        level_map = {
            0: logging.getLevelName(base_level.upper()),
            1: logging.INFO,
            2: logging.DEBUG,
        }

        level = level_map.get(verbosity, logging.DEBUG)

        log_format = (
            "%(levelname)s: %(name)s: %(message)s"
            if verbosity >= VERBOSE_LOGGING_THRESHOLD
            else "%(levelname)s: %(message)s"
        )

        logging.basicConfig(level=level, format=log_format, handlers=[logging.StreamHandler(sys.stderr)])

    def build_parser(self) -> argparse.ArgumentParser:
        """Build the argument parser."""
        parser = argparse.ArgumentParser(
            prog="recording-format",
            description="Plan codec, quality and file size for audio recordings",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Best configuration for a one-hour meeting that must stay under 50 MB
  recording-format audio configure meeting --max-size 50 --duration 60

  # Compare every format for a 30 minute recording
  recording-format audio estimate --duration 30 --max-size 10

  # Check a format/quality pair on Android
  recording-format --platform android audio check wav ultra
            """,
        )

        # Global options
        parser.add_argument(
            "-v",
            "--verbose",
            action="count",
            default=0,
            help="Increase verbosity (-v for info, -vv for debug)",
        )

        parser.add_argument("--config", type=Path, help="Path to configuration file")

        parser.add_argument(
            "--platform",
            type=str.lower,
            choices=list(PLATFORMS),
            help="Recording platform (overrides selection.platform from config)",
        )

        # Subcommands
        subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

        audio_parser = subparsers.add_parser("audio", help="Format and quality selection commands")
        self.audio_commands.add_subcommands(audio_parser)

        utils_parser = subparsers.add_parser("utils", help="Utility commands")
        self.utility_commands.add_subcommands(utils_parser)

        return parser

    @staticmethod
    def create_selection_options(args: argparse.Namespace) -> SelectionOptions:
        """Create selection options from CLI arguments."""
        return SelectionOptions(
            platform=getattr(args, "platform", None),
            verbose=getattr(args, "verbose", 0) > 0,
        )

    def run(self, args: list[str] | None = None) -> int:
        """Run the CLI with given arguments."""
        parser = self.build_parser()
        parsed_args = parser.parse_args(args)

        # Update config manager if custom config provided
        if getattr(parsed_args, "config", None):
            self.config_manager = ConfigManager(parsed_args.config)
            self.audio_commands.config_manager = self.config_manager
            self.utility_commands.config_manager = self.config_manager

        self.setup_logging(parsed_args.verbose, str(self.config_manager.get_value("global_.log_level", "WARNING")))

        selection_options = self.create_selection_options(parsed_args)

        try:
            with with_config_overrides(self.config_manager) as config_mgr:
                config_mgr.apply_selection_options(selection_options)

                if parsed_args.command == "audio":
                    return self.audio_commands.handle_command(parsed_args)
                if parsed_args.command == "utils":
                    return self.utility_commands.handle_command(parsed_args)
                parser.error(f"Unknown command: {parsed_args.command}")

        except KeyboardInterrupt:
            logging.getLogger(__name__).info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except (FormatToolkitError, ValueError):
            logging.getLogger(__name__).exception("Command failed")
            return 1

        return 0


def main() -> int:
    """Entry point for the CLI."""
    cli = FormatToolkitCLI()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
