"""Format and quality selection CLI commands."""

from __future__ import annotations

import argparse
import json
import logging
from datetime import timedelta
from pathlib import Path
from typing import TYPE_CHECKING

from ...audio import advisory, estimate
from ...core.catalog import FORMAT_SPECS, AudioFormat, AudioQuality
from ...processors import (
    CompatibilityRequest,
    ConfigurationRequest,
    EstimateRequest,
    FormatManager,
    FormatRequest,
    QualityRequest,
    RecommendationRequest,
)

if TYPE_CHECKING:
    from ...core import ConfigManager, RecordingConfiguration

LOG = logging.getLogger(__name__)


def _format_arg(value: str) -> AudioFormat:
    try:
        return AudioFormat.from_extension(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _quality_arg(value: str) -> AudioQuality:
    try:
        return AudioQuality.from_name(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _non_negative_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Expected a number, got '{value}'") from e
    if number < 0:
        raise argparse.ArgumentTypeError(f"Expected a non-negative number, got {number}")
    return number


def _add_constraint_arguments(parser: argparse.ArgumentParser, *, duration_required: bool = False) -> None:
    parser.add_argument("--max-size", type=_non_negative_float, metavar="MB", help="Maximum file size in megabytes")
    parser.add_argument(
        "--duration",
        type=_non_negative_float,
        metavar="MIN",
        required=duration_required,
        help="Expected recording duration in minutes",
    )


def _duration(args: argparse.Namespace) -> timedelta | None:
    return timedelta(minutes=args.duration) if args.duration is not None else None


class AudioCommands:
    """Format selection command handlers."""

    def __init__(self, config_manager: ConfigManager) -> None:
        """Initialize audio commands handler."""
        self.config_manager = config_manager

    def add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        """Add audio subcommands to parser."""
        subparsers = parser.add_subparsers(dest="audio_command", help="Audio commands")

        # Configure command
        configure_parser = subparsers.add_parser("configure", help="Compose a full recording configuration")
        configure_parser.add_argument(
            "recording_type", nargs="?", help="What is being recorded, e.g. meeting, speech, music"
        )
        configure_parser.add_argument("--prioritize-quality", action="store_true", help="Prefer fidelity")
        configure_parser.add_argument("--prioritize-size", action="store_true", help="Prefer small files")
        _add_constraint_arguments(configure_parser)
        configure_parser.add_argument(
            "--strict", action="store_true", help="Exit with an error when the size limit cannot be met"
        )
        configure_parser.add_argument("--json", help="Save the configuration to a JSON file")

        # Format command
        format_parser = subparsers.add_parser("format", help="Choose a format for a quality tier")
        format_parser.add_argument("--quality", "-q", type=_quality_arg, required=True, help="Quality tier")
        format_parser.add_argument("--prioritize-quality", action="store_true", help="Prefer fidelity")
        format_parser.add_argument("--prioritize-size", action="store_true", help="Prefer small files")
        _add_constraint_arguments(format_parser)

        # Quality command
        quality_parser = subparsers.add_parser("quality", help="Choose a quality tier for a format")
        quality_parser.add_argument("--format", "-f", type=_format_arg, required=True, help="Audio format")
        quality_parser.add_argument("--type", "-t", dest="recording_type", help="Recording type")
        _add_constraint_arguments(quality_parser)

        # Estimate command
        estimate_parser = subparsers.add_parser("estimate", help="Estimate recording sizes")
        estimate_parser.add_argument("--format", "-f", type=_format_arg, help="Audio format (default: compare all)")
        estimate_parser.add_argument("--quality", "-q", type=_quality_arg, help="Quality tier (default: all)")
        _add_constraint_arguments(estimate_parser, duration_required=True)
        estimate_parser.add_argument("--csv", help="Save results to CSV file")

        # Check command
        check_parser = subparsers.add_parser("check", help="Check whether a format/quality pair is usable")
        check_parser.add_argument("format", type=_format_arg, help="Audio format")
        check_parser.add_argument("quality", type=_quality_arg, help="Quality tier")
        check_parser.add_argument("--type", "-t", dest="recording_type", help="Recording type for advice")

        # Formats command
        subparsers.add_parser("formats", help="List formats supported on the platform")

    def handle_command(self, args: argparse.Namespace) -> int:
        """Handle audio command execution."""
        if not hasattr(args, "audio_command") or args.audio_command is None:
            LOG.error("No audio command specified")
            return 1

        handlers = {
            "configure": self._handle_configure,
            "format": self._handle_format,
            "quality": self._handle_quality,
            "estimate": self._handle_estimate,
            "check": self._handle_check,
            "formats": self._handle_formats,
        }
        handler = handlers.get(args.audio_command)
        if handler is None:
            LOG.error("Unknown audio command: %s", args.audio_command)
            return 1
        return handler(args)

    def _manager(self) -> FormatManager:
        return FormatManager(self.config_manager)

    def _handle_configure(self, args: argparse.Namespace) -> int:
        """Handle configuration composition."""
        manager = self._manager()
        config = manager.get_optimal_configuration(
            ConfigurationRequest(
                recording_type=args.recording_type,
                prioritize_quality=args.prioritize_quality,
                prioritize_size=args.prioritize_size,
                max_file_size_mb=args.max_size,
                expected_duration=_duration(args),
            )
        )
        advice = manager.get_format_recommendation(
            RecommendationRequest(config.audio_format, config.quality, config.recording_type)
        )
        self._print_configuration(config, advice)

        if args.json:
            try:
                json_path = Path(args.json)
                json_path.parent.mkdir(parents=True, exist_ok=True)
                json_path.write_text(json.dumps(config.model_dump(), indent=2))
            except OSError:
                LOG.exception("Could not write %s", args.json)
                return 1

        if config.constraint_satisfied is False:
            LOG.warning(
                "Size limit %.2f MB cannot be met; best effort is %.2f MB",
                config.max_file_size_mb,
                config.estimated_size_mb,
            )
            return 1 if args.strict else 0
        return 0

    @staticmethod
    def _print_configuration(config: RecordingConfiguration, advice: str) -> None:
        print(f"Recording type: {config.recording_type}")
        print(f"Configuration:  {config.summary}")
        print(f"Format:         {config.audio_format.value} ({config.audio_format.mime_type})")
        print(f"Bit rate:       {config.bit_rate / 1000:.0f} kbps")
        print(f"Noise reduction: {'on' if config.enable_noise_reduction else 'off'}")
        print(f"Auto gain:       {'on' if config.enable_auto_gain_control else 'off'}")
        print(f"Echo cancel:     {'on' if config.enable_echo_cancellation else 'off'}")
        if config.estimated_size_mb is not None:
            status = "✓ within limit" if config.constraint_satisfied else "⚠️  over limit"
            print(f"Estimated size: {config.estimated_size_mb:.2f} MB / {config.max_file_size_mb:.2f} MB {status}")
        print(f"\n💡 {advice}")

    def _handle_format(self, args: argparse.Namespace) -> int:
        """Handle format selection."""
        audio_format = self._manager().get_optimal_format(
            FormatRequest(
                quality=args.quality,
                prioritize_quality=args.prioritize_quality,
                prioritize_size=args.prioritize_size,
                max_file_size_mb=args.max_size,
                expected_duration=_duration(args),
            )
        )
        print(audio_format.value)
        return 0

    def _handle_quality(self, args: argparse.Namespace) -> int:
        """Handle quality selection."""
        quality = self._manager().get_optimal_quality(
            QualityRequest(
                audio_format=args.format,
                recording_type=args.recording_type,
                max_file_size_mb=args.max_size,
                expected_duration=_duration(args),
            )
        )
        print(quality.value)
        return 0

    def _handle_estimate(self, args: argparse.Namespace) -> int:
        """Handle size estimation."""
        manager = self._manager()
        duration = _duration(args)

        if args.format is not None and args.quality is not None:
            size = manager.estimate_file_size(EstimateRequest(args.format, args.quality, duration))
            print(f"{args.format.value} at {args.quality.value} for {args.duration:g} min: {size:.2f} MB")
            if args.max_size is not None and size > args.max_size:
                print(f"⚠️  Exceeds the {args.max_size:.2f} MB limit")
            return 0

        results = estimate.compare_formats(
            duration, quality=args.quality, platform=manager.platform, max_file_size_mb=args.max_size
        )
        if args.format is not None:
            results = [r for r in results if r.audio_format is args.format]
        if not results:
            LOG.error("%s is not supported on platform %s", args.format.value, manager.platform.name)
            return 1

        recommended = estimate.recommend_result(results)
        estimate.print_comparison(results, recommended, duration=duration, max_file_size_mb=args.max_size)

        if args.csv:
            try:
                estimate.save_csv(results, args.csv)
            except OSError:
                LOG.exception("Could not write %s", args.csv)
                return 1
        return 0

    def _handle_check(self, args: argparse.Namespace) -> int:
        """Handle compatibility check."""
        manager = self._manager()
        compatible = manager.is_format_compatible(CompatibilityRequest(args.format, args.quality))
        mark = "✓ compatible" if compatible else "✗ not compatible"
        print(f"{args.format.value} at {args.quality.value} on {manager.platform.name}: {mark}")

        if args.recording_type:
            advice = manager.get_format_recommendation(
                RecommendationRequest(args.format, args.quality, args.recording_type)
            )
            print(f"💡 {advice}")
        return 0 if compatible else 1

    def _handle_formats(self, _args: argparse.Namespace) -> int:
        """Handle format listing."""
        platform = self._manager().platform
        print(f"Formats supported on {platform.name} (balanced default: {platform.balanced_format.value})")
        print(f"{'Format':<8} {'Name':<24} {'Band':<12} {'Ratio':>6} {'VBR':>4}  Qualities")
        for audio_format in platform.supported_formats:
            spec = FORMAT_SPECS[audio_format]
            qualities = ", ".join(
                q.value for q in AudioQuality if advisory.is_format_compatible(audio_format, q, platform=platform)
            )
            vbr = "yes" if spec.variable_bitrate else "no"
            print(
                f"{audio_format.value:<8} {spec.name:<24} {spec.fidelity_band:<12} "
                f"{spec.compression_ratio:>6.2f} {vbr:>4}  {qualities}"
            )
        return 0
