"""Request objects for the FormatManager API. Every optional field may be omitted independently."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..core.base import SizeConstraint

if TYPE_CHECKING:
    from datetime import timedelta

    from ..core.catalog import AudioFormat, AudioQuality


@dataclass(frozen=True)
class FormatRequest:
    """Options for choosing a format at a given quality."""

    quality: AudioQuality
    prioritize_quality: bool = False
    prioritize_size: bool = False
    max_file_size_mb: float | None = None
    expected_duration: timedelta | None = None

    @property
    def constraint(self) -> SizeConstraint | None:
        return SizeConstraint.from_options(self.max_file_size_mb, self.expected_duration)


@dataclass(frozen=True)
class QualityRequest:
    """Options for choosing a quality tier for a format."""

    audio_format: AudioFormat
    recording_type: str | None = None
    max_file_size_mb: float | None = None
    expected_duration: timedelta | None = None

    @property
    def constraint(self) -> SizeConstraint | None:
        return SizeConstraint.from_options(self.max_file_size_mb, self.expected_duration)


@dataclass(frozen=True)
class ConfigurationRequest:
    """Options for composing a full recording configuration."""

    recording_type: str | None = None
    prioritize_quality: bool = False
    prioritize_size: bool = False
    max_file_size_mb: float | None = None
    expected_duration: timedelta | None = None

    @property
    def constraint(self) -> SizeConstraint | None:
        return SizeConstraint.from_options(self.max_file_size_mb, self.expected_duration)


@dataclass(frozen=True)
class EstimateRequest:
    audio_format: AudioFormat
    quality: AudioQuality
    duration: timedelta


@dataclass(frozen=True)
class RecommendedQualitiesRequest:
    audio_format: AudioFormat
    recording_type: str | None = None


@dataclass(frozen=True)
class RecommendationRequest:
    audio_format: AudioFormat
    quality: AudioQuality
    recording_type: str | None = None


@dataclass(frozen=True)
class CompatibilityRequest:
    audio_format: AudioFormat | str | None
    quality: AudioQuality | str | None
