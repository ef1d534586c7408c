"""audio.advisory - compatibility checks and human-readable recommendations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..core.catalog import (
    BYTE_COST_PER_MINUTE,
    GENERIC_PLATFORM,
    AudioFormat,
    AudioQuality,
    PlatformCapabilities,
)
from ..core.profiles import resolve_profile

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..core.profiles import RecordingTypeProfile

LOG = logging.getLogger(__name__)

# 8-bit 8 kHz PCM is larger than any lossy tier and sounds worse than all of them
INCOMPATIBLE_PAIRS = frozenset({(AudioFormat.WAV, AudioQuality.LOW)})


def _coerce(value: object, enum_type: type[AudioFormat] | type[AudioQuality]) -> AudioFormat | AudioQuality | None:
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(str(value).strip().lower())
    except ValueError:
        return None


def is_format_compatible(
    audio_format: AudioFormat | str | None,
    quality: AudioQuality | str | None,
    *,
    platform: PlatformCapabilities = GENERIC_PLATFORM,
) -> bool:
    """Whether the platform can record ``audio_format`` at ``quality``. Never raises."""
    fmt = _coerce(audio_format, AudioFormat)
    tier = _coerce(quality, AudioQuality)
    if fmt is None or tier is None:
        LOG.debug("Unrecognised format/quality pair %r/%r", audio_format, quality)
        return False

    if (fmt, tier) not in BYTE_COST_PER_MINUTE:
        return False
    if fmt not in platform.supported_formats:
        return False
    if (fmt, tier) in INCOMPATIBLE_PAIRS:
        return False
    if fmt is AudioFormat.WAV and tier is AudioQuality.ULTRA:
        return platform.supports_high_bit_depth
    return True


def recommended_qualities(
    recording_type: str | None,
    audio_format: AudioFormat,
    *,
    platform: PlatformCapabilities = GENERIC_PLATFORM,
    custom_profiles: Mapping[str, RecordingTypeProfile] | None = None,
) -> frozenset[AudioQuality]:
    """Tiers worth offering for this recording type, limited to compatible ones."""
    profile = resolve_profile(recording_type, custom_profiles)
    return frozenset(
        q for q in profile.recommended_qualities if is_format_compatible(audio_format, q, platform=platform)
    )


def format_recommendation(
    audio_format: AudioFormat,
    quality: AudioQuality,
    recording_type: str | None,
    *,
    custom_profiles: Mapping[str, RecordingTypeProfile] | None = None,
) -> str:
    """Display text for a format choice. Always names the recording type, format and tier."""
    label = (recording_type or "").strip().lower() or "general"
    choice = f"{audio_format.value.upper()} at {quality.value}"
    profile = resolve_profile(recording_type, custom_profiles)

    if profile.is_speech:
        if audio_format is AudioFormat.MP3 and quality is AudioQuality.MEDIUM:
            return f"Excellent choice for {label} recordings - {choice} gives good quality with small file size"
        if audio_format is AudioFormat.M4A and quality is AudioQuality.MEDIUM:
            return f"Great choice for {label} - {choice} sounds better than MP3 with similar file size"
        if audio_format is AudioFormat.AAC and quality <= AudioQuality.MEDIUM:
            return f"Compact choice for {label} recordings - {choice} keeps files smallest with clear speech"
    else:
        if audio_format is AudioFormat.M4A and quality is AudioQuality.HIGH:
            return f"Excellent choice for {label} - {choice} gives high quality with reasonable file size"
        if audio_format is AudioFormat.WAV and quality is AudioQuality.ULTRA:
            return f"Professional quality for {label} - {choice} is uncompressed audio with maximum fidelity"

    return f"{choice} is a good choice for {label} recordings"
