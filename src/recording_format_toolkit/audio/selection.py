"""
audio.selection - format, quality and configuration selection.

The composer resolves the format/quality dependency in two passes: the
format is chosen with the profile's preferred tier as a provisional
quality, then the quality is refined for that format against the size
constraint. Calling ``select_format`` and then ``select_quality`` in that
order gives the same result as ``build_configuration``.

Only pairs the platform can record are ever returned, and size limits are
compared against unrounded estimates.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..core.base import RecordingConfiguration, SizeConstraint
from ..core.catalog import (
    FORMAT_SPECS,
    GENERIC_PLATFORM,
    AudioFormat,
    AudioQuality,
    PlatformCapabilities,
    byte_cost_per_minute,
)
from ..core.profiles import RecordingTypeProfile, resolve_profile
from .advisory import is_format_compatible
from .estimate import estimate_file_size, estimate_megabytes

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

LOG = logging.getLogger(__name__)

# Lowest to highest fidelity
FIDELITY_BANDS = ("compact", "transparent", "lossless")


def _highest_fidelity(formats: Sequence[AudioFormat], quality: AudioQuality) -> AudioFormat:
    """Largest format within the best fidelity band present in ``formats``."""
    best_band = max(FIDELITY_BANDS.index(FORMAT_SPECS[f].fidelity_band) for f in formats)
    band = [f for f in formats if FIDELITY_BANDS.index(FORMAT_SPECS[f].fidelity_band) == best_band]
    return max(band, key=lambda f: byte_cost_per_minute(f, quality))


def _smallest(formats: Sequence[AudioFormat], quality: AudioQuality) -> AudioFormat:
    return min(formats, key=lambda f: byte_cost_per_minute(f, quality))


def _fits(constraint: SizeConstraint, audio_format: AudioFormat, quality: AudioQuality) -> bool:
    return constraint.allows(estimate_megabytes(audio_format, quality, constraint.expected_duration))


def recordable_qualities(
    audio_format: AudioFormat, platform: PlatformCapabilities = GENERIC_PLATFORM
) -> list[AudioQuality]:
    """Tiers, lowest first, the platform can record in ``audio_format``."""
    return [q for q in AudioQuality if is_format_compatible(audio_format, q, platform=platform)]


def recordable_formats(quality: AudioQuality, platform: PlatformCapabilities = GENERIC_PLATFORM) -> list[AudioFormat]:
    """Supported formats, in platform order, the platform can record at ``quality``."""
    return [f for f in platform.supported_formats if is_format_compatible(f, quality, platform=platform)]


def select_quality_for_profile(
    audio_format: AudioFormat,
    profile: RecordingTypeProfile,
    constraint: SizeConstraint | None = None,
    *,
    platform: PlatformCapabilities = GENERIC_PLATFORM,
) -> AudioQuality:
    """Walk down from the profile's preferred tier until the estimate fits the constraint."""
    preferred = profile.preferred_quality
    recordable = recordable_qualities(audio_format, platform)
    if not recordable:
        LOG.debug("%s cannot be recorded on %s, ignoring compatibility", audio_format.value, platform.name)
        recordable = list(AudioQuality)

    # Below the lowest recordable tier (e.g. 8-bit WAV) the walk starts at that tier instead
    candidates = [q for q in AudioQuality.descending(preferred) if q in recordable] or [recordable[0]]
    if constraint is None:
        return candidates[0]

    for candidate in candidates:
        if _fits(constraint, audio_format, candidate):
            if candidate != preferred:
                LOG.debug(
                    "Downgraded %s from %s to %s to fit %.2f MB",
                    audio_format.value,
                    preferred.value,
                    candidate.value,
                    constraint.max_file_size_mb,
                )
            return candidate

    lowest = recordable[0]
    LOG.info(
        "No %s quality fits %.2f MB over %s, falling back to %s",
        audio_format.value,
        constraint.max_file_size_mb,
        constraint.expected_duration,
        lowest.value,
    )
    return lowest


def select_quality(
    audio_format: AudioFormat,
    recording_type: str | None,
    constraint: SizeConstraint | None = None,
    *,
    platform: PlatformCapabilities = GENERIC_PLATFORM,
    custom_profiles: Mapping[str, RecordingTypeProfile] | None = None,
) -> AudioQuality:
    """Pick a quality tier for ``audio_format`` and the given recording type."""
    profile = resolve_profile(recording_type, custom_profiles)
    return select_quality_for_profile(audio_format, profile, constraint, platform=platform)


def select_format(
    quality: AudioQuality,
    prioritize_quality: bool = False,
    prioritize_size: bool = False,
    constraint: SizeConstraint | None = None,
    *,
    platform: PlatformCapabilities = GENERIC_PLATFORM,
) -> AudioFormat:
    """
    Pick a format for ``quality``.

    Quality priority wins when both flags are set. With a constraint, the
    flags choose among the formats that fit at ``quality`` and, without
    flags, the first fitting format in platform order wins; when none fit,
    the smallest format is returned.
    """
    candidates: Sequence[AudioFormat] = recordable_formats(quality, platform) or platform.supported_formats

    if constraint is not None:
        fitting = [f for f in candidates if _fits(constraint, f, quality)]
        if not fitting:
            smallest = _smallest(candidates, quality)
            LOG.info(
                "No format fits %.2f MB at %s quality, falling back to %s",
                constraint.max_file_size_mb,
                quality.value,
                smallest.value,
            )
            return smallest
        candidates = fitting

    if prioritize_quality:
        if prioritize_size:
            LOG.debug("Both priorities set, quality takes precedence")
        return _highest_fidelity(candidates, quality)
    if prioritize_size:
        return _smallest(candidates, quality)
    if constraint is None and platform.balanced_format in candidates:
        return platform.balanced_format
    return candidates[0]


def build_configuration(
    recording_type: str | None,
    prioritize_quality: bool = False,
    prioritize_size: bool = False,
    constraint: SizeConstraint | None = None,
    *,
    platform: PlatformCapabilities = GENERIC_PLATFORM,
    custom_profiles: Mapping[str, RecordingTypeProfile] | None = None,
) -> RecordingConfiguration:
    """Compose a full recording configuration for a recording type."""
    profile = resolve_profile(recording_type, custom_profiles)

    provisional = profile.preferred_quality
    audio_format = select_format(provisional, prioritize_quality, prioritize_size, constraint, platform=platform)
    quality = select_quality_for_profile(audio_format, profile, constraint, platform=platform)

    estimated_size = None
    satisfied = None
    if constraint is not None:
        estimated_size = estimate_file_size(audio_format, quality, constraint.expected_duration)
        satisfied = _fits(constraint, audio_format, quality)
        if not satisfied:
            LOG.info(
                "Best effort: %s/%s is %.2f MB, above the %.2f MB limit",
                audio_format.value,
                quality.value,
                estimated_size,
                constraint.max_file_size_mb,
            )

    LOG.debug("Profile %s -> %s at %s quality", profile.name, audio_format.value, quality.value)

    return RecordingConfiguration(
        audio_format=audio_format,
        quality=quality,
        sample_rate=quality.sample_rate,
        bit_depth=quality.bit_depth,
        channels=profile.channels,
        bit_rate=byte_cost_per_minute(audio_format, quality) * 8 // 60,
        enable_noise_reduction=profile.noise_reduction,
        enable_auto_gain_control=profile.auto_gain_control,
        enable_echo_cancellation=profile.echo_cancellation,
        recording_type=(recording_type or "").strip().lower() or profile.name,
        max_file_size_mb=constraint.max_file_size_mb if constraint else None,
        estimated_size_mb=estimated_size,
        constraint_satisfied=satisfied,
    )
