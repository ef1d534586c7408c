"""Value types and exceptions shared by the selection engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .catalog import AudioFormat, AudioQuality

LOG = logging.getLogger(__name__)


class FormatToolkitError(Exception):
    """Base exception for recording format toolkit errors."""

    def __init__(
        self,
        message: str,
        audio_format: AudioFormat | None = None,
        quality: AudioQuality | None = None,
    ) -> None:
        super().__init__(message)
        self.audio_format = audio_format
        self.quality = quality


class UnknownCombinationError(FormatToolkitError):
    """A format/quality pair has no catalog entry. This is a defect in the catalog tables."""


@dataclass(frozen=True)
class SizeConstraint:
    """Hard upper bound on the predicted size of a recording."""

    max_file_size_mb: float
    expected_duration: timedelta

    def __post_init__(self) -> None:
        if self.expected_duration < timedelta(0):
            msg = f"Expected duration must not be negative, got {self.expected_duration}"
            raise ValueError(msg)
        if self.max_file_size_mb < 0:
            msg = f"Maximum file size must not be negative, got {self.max_file_size_mb}"
            raise ValueError(msg)

    @classmethod
    def from_options(
        cls,
        max_file_size_mb: float | None,
        expected_duration: timedelta | None,
    ) -> SizeConstraint | None:
        """Build a constraint when both halves are given, otherwise treat the call as unconstrained."""
        if max_file_size_mb is None or expected_duration is None:
            if max_file_size_mb is not None or expected_duration is not None:
                LOG.debug(
                    "Ignoring partial size constraint (max=%s, duration=%s): both values are required",
                    max_file_size_mb,
                    expected_duration,
                )
            return None
        return cls(max_file_size_mb=float(max_file_size_mb), expected_duration=expected_duration)

    def allows(self, size_mb: float) -> bool:
        return size_mb <= self.max_file_size_mb


@dataclass(frozen=True)
class RecordingConfiguration:
    """Complete recording setup handed to the capture pipeline."""

    audio_format: AudioFormat
    quality: AudioQuality
    sample_rate: int
    bit_depth: int
    channels: int
    bit_rate: int
    enable_noise_reduction: bool
    enable_auto_gain_control: bool
    enable_echo_cancellation: bool
    recording_type: str
    max_file_size_mb: float | None = None
    estimated_size_mb: float | None = None
    constraint_satisfied: bool | None = None

    @property
    def is_mono(self) -> bool:
        return self.channels == 1

    @property
    def is_stereo(self) -> bool:
        return self.channels == 2  # noqa: PLR2004

    @property
    def summary(self) -> str:
        """One-line description, e.g. ``M4A • Medium • 22050Hz • 16bit • 1ch``."""
        return (
            f"{self.audio_format.extension.upper()} • {self.quality.label} • "
            f"{self.sample_rate}Hz • {self.bit_depth}bit • {self.channels}ch"
        )

    def model_dump(self) -> dict[str, Any]:
        """Return dictionary representation of the configuration."""
        return {
            "format": self.audio_format.value,
            "mime_type": self.audio_format.mime_type,
            "quality": self.quality.value,
            "sample_rate": self.sample_rate,
            "bit_depth": self.bit_depth,
            "channels": self.channels,
            "bit_rate": self.bit_rate,
            "enable_noise_reduction": self.enable_noise_reduction,
            "enable_auto_gain_control": self.enable_auto_gain_control,
            "enable_echo_cancellation": self.enable_echo_cancellation,
            "recording_type": self.recording_type,
            "max_file_size_mb": self.max_file_size_mb,
            "estimated_size_mb": self.estimated_size_mb,
            "constraint_satisfied": self.constraint_satisfied,
        }
