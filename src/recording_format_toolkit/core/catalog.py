"""
Static catalog of recording formats, quality tiers and platform capabilities.

The byte-cost table is the single source of truth for every size estimate.
Each (format, quality) pair must have an entry; the catalog checks this
when the module is imported so a gap fails loudly instead of surfacing as
a wrong recommendation later.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from .base import UnknownCombinationError

LOG = logging.getLogger(__name__)


class AudioFormat(Enum):
    """Container/codec combinations the recorder can write."""

    WAV = "wav"
    MP3 = "mp3"
    M4A = "m4a"
    AAC = "aac"

    @property
    def extension(self) -> str:
        return self.value

    @property
    def mime_type(self) -> str:
        return _MIME_TYPES[self]

    @classmethod
    def from_extension(cls, extension: str) -> AudioFormat:
        """Parse a file extension (with or without leading dot), case-insensitive."""
        normalized = str(extension).strip().lower().lstrip(".")
        for audio_format in cls:
            if audio_format.value == normalized:
                return audio_format
        available = ", ".join(f.value for f in cls)
        msg = f"Unknown audio format '{extension}'. Available: {available}"
        raise ValueError(msg)


@functools.total_ordering
class AudioQuality(Enum):
    """Ordered fidelity tiers, independent of format."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    ULTRA = "ultra"

    @property
    def rank(self) -> int:
        return _QUALITY_ORDER.index(self)

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def sample_rate(self) -> int:
        return _QUALITY_SIGNAL[self][0]

    @property
    def bit_depth(self) -> int:
        return _QUALITY_SIGNAL[self][1]

    @property
    def description(self) -> str:
        return _QUALITY_SIGNAL[self][2]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, AudioQuality):
            return NotImplemented
        return self.rank < other.rank

    @classmethod
    def from_name(cls, name: str) -> AudioQuality:
        """Parse a tier name, case-insensitive."""
        normalized = str(name).strip().lower()
        for quality in cls:
            if quality.value == normalized:
                return quality
        available = ", ".join(q.value for q in cls)
        msg = f"Unknown audio quality '{name}'. Available: {available}"
        raise ValueError(msg)

    @classmethod
    def descending(cls, start: AudioQuality | None = None) -> list[AudioQuality]:
        """Tiers from ``start`` (default: the highest) down to the lowest."""
        top = (start or _QUALITY_ORDER[-1]).rank
        return [_QUALITY_ORDER[i] for i in range(top, -1, -1)]


_QUALITY_ORDER: tuple[AudioQuality, ...] = tuple(AudioQuality)

_MIME_TYPES = MappingProxyType(
    {
        AudioFormat.WAV: "audio/wav",
        AudioFormat.MP3: "audio/mpeg",
        AudioFormat.M4A: "audio/mp4",
        AudioFormat.AAC: "audio/aac",
    }
)

# sample rate (Hz), bit depth, description
_QUALITY_SIGNAL = MappingProxyType(
    {
        AudioQuality.LOW: (8000, 8, "Voice recording, minimal storage"),
        AudioQuality.MEDIUM: (22050, 16, "Good balance of quality and file size"),
        AudioQuality.HIGH: (44100, 16, "High quality recording, larger file size"),
        AudioQuality.ULTRA: (48000, 24, "Professional quality, maximum file size"),
    }
)

REFERENCE_QUALITY = AudioQuality.HIGH


def _kbps(rate: int) -> int:
    """Bytes per minute for a constant bit rate in kbit/s."""
    return rate * 1000 // 8 * 60


def _pcm(quality: AudioQuality) -> int:
    """Bytes per minute of mono PCM at the tier's sample rate and bit depth."""
    return quality.sample_rate * quality.bit_depth // 8 * 60


# Mono bytes per minute. Lossy rows use common encoder targets for each tier:
# AAC-LC in MP4 48/128/256/320 kbps, MP3 CBR 40/96/192/256 kbps,
# ADTS AAC (HE-AAC at the low tiers) 24/64/128/192 kbps.
BYTE_COST_PER_MINUTE: MappingProxyType[tuple[AudioFormat, AudioQuality], int] = MappingProxyType(
    {
        (AudioFormat.WAV, AudioQuality.LOW): _pcm(AudioQuality.LOW),
        (AudioFormat.WAV, AudioQuality.MEDIUM): _pcm(AudioQuality.MEDIUM),
        (AudioFormat.WAV, AudioQuality.HIGH): _pcm(AudioQuality.HIGH),
        (AudioFormat.WAV, AudioQuality.ULTRA): _pcm(AudioQuality.ULTRA),
        (AudioFormat.MP3, AudioQuality.LOW): _kbps(40),
        (AudioFormat.MP3, AudioQuality.MEDIUM): _kbps(96),
        (AudioFormat.MP3, AudioQuality.HIGH): _kbps(192),
        (AudioFormat.MP3, AudioQuality.ULTRA): _kbps(256),
        (AudioFormat.M4A, AudioQuality.LOW): _kbps(48),
        (AudioFormat.M4A, AudioQuality.MEDIUM): _kbps(128),
        (AudioFormat.M4A, AudioQuality.HIGH): _kbps(256),
        (AudioFormat.M4A, AudioQuality.ULTRA): _kbps(320),
        (AudioFormat.AAC, AudioQuality.LOW): _kbps(24),
        (AudioFormat.AAC, AudioQuality.MEDIUM): _kbps(64),
        (AudioFormat.AAC, AudioQuality.HIGH): _kbps(128),
        (AudioFormat.AAC, AudioQuality.ULTRA): _kbps(192),
    }
)


@dataclass(frozen=True)
class FormatSpec:
    """Static characteristics of a format."""

    audio_format: AudioFormat
    name: str
    fidelity_band: str  # "lossless", "transparent" or "compact"
    variable_bitrate: bool

    @property
    def compression_ratio(self) -> float:
        """Size relative to uncompressed PCM at the reference tier (1.0 = no compression)."""
        return compression_ratio(self.audio_format)


FORMAT_SPECS: MappingProxyType[AudioFormat, FormatSpec] = MappingProxyType(
    {
        AudioFormat.WAV: FormatSpec(AudioFormat.WAV, "PCM WAVE", "lossless", variable_bitrate=False),
        AudioFormat.MP3: FormatSpec(AudioFormat.MP3, "MPEG-1 Audio Layer III", "compact", variable_bitrate=True),
        AudioFormat.M4A: FormatSpec(AudioFormat.M4A, "AAC-LC in MPEG-4", "transparent", variable_bitrate=True),
        AudioFormat.AAC: FormatSpec(AudioFormat.AAC, "ADTS AAC / HE-AAC", "compact", variable_bitrate=True),
    }
)


@dataclass(frozen=True)
class PlatformCapabilities:
    """What a recording platform can capture."""

    name: str
    supported_formats: tuple[AudioFormat, ...]
    balanced_format: AudioFormat
    supports_high_bit_depth: bool


PLATFORMS: MappingProxyType[str, PlatformCapabilities] = MappingProxyType(
    {
        "generic": PlatformCapabilities(
            name="generic",
            supported_formats=tuple(AudioFormat),
            balanced_format=AudioFormat.M4A,
            supports_high_bit_depth=True,
        ),
        "ios": PlatformCapabilities(
            name="ios",
            supported_formats=(AudioFormat.M4A, AudioFormat.AAC, AudioFormat.WAV),
            balanced_format=AudioFormat.M4A,
            supports_high_bit_depth=True,
        ),
        "android": PlatformCapabilities(
            name="android",
            supported_formats=(AudioFormat.MP3, AudioFormat.AAC, AudioFormat.WAV),
            balanced_format=AudioFormat.AAC,
            supports_high_bit_depth=False,
        ),
        "desktop": PlatformCapabilities(
            name="desktop",
            supported_formats=(AudioFormat.MP3, AudioFormat.WAV),
            balanced_format=AudioFormat.WAV,
            supports_high_bit_depth=True,
        ),
    }
)

GENERIC_PLATFORM = PLATFORMS["generic"]


def get_platform(name: str | None) -> PlatformCapabilities:
    """Look up a platform by name (None means generic)."""
    if name is None:
        return GENERIC_PLATFORM
    key = str(name).strip().lower()
    if key not in PLATFORMS:
        available = ", ".join(PLATFORMS)
        msg = f"Unknown platform '{name}'. Available: {available}"
        raise ValueError(msg)
    return PLATFORMS[key]


def supported_formats(platform: PlatformCapabilities = GENERIC_PLATFORM) -> tuple[AudioFormat, ...]:
    """Formats the platform can record, in catalog order."""
    return platform.supported_formats


def byte_cost_per_minute(audio_format: AudioFormat, quality: AudioQuality) -> int:
    """Bytes one minute of mono audio takes in ``audio_format`` at ``quality``."""
    try:
        return BYTE_COST_PER_MINUTE[(audio_format, quality)]
    except KeyError:
        raise UnknownCombinationError(
            f"No byte cost defined for {audio_format} at {quality}",
            audio_format=audio_format,
            quality=quality,
        ) from None


def compression_ratio(audio_format: AudioFormat) -> float:
    """Reference-tier size of ``audio_format`` divided by uncompressed WAV."""
    pcm = byte_cost_per_minute(AudioFormat.WAV, REFERENCE_QUALITY)
    return byte_cost_per_minute(audio_format, REFERENCE_QUALITY) / pcm


def validate_catalog(table: MappingProxyType | dict | None = None) -> None:
    """Check the table covers the full format x quality grid with positive costs."""
    table = BYTE_COST_PER_MINUTE if table is None else table
    for audio_format in AudioFormat:
        for quality in AudioQuality:
            cost = table.get((audio_format, quality))
            if cost is None or cost <= 0:
                raise UnknownCombinationError(
                    f"Catalog is missing a byte cost for {audio_format.value}/{quality.value}",
                    audio_format=audio_format,
                    quality=quality,
                )
    LOG.debug("Catalog validated: %d formats x %d qualities", len(AudioFormat), len(AudioQuality))


validate_catalog()
