"""Recording-type profiles: defaults derived from what is being recorded."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from .catalog import AudioQuality

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..config.settings import ProfileSettings

LOG = logging.getLogger(__name__)

MONO = 1
STEREO = 2


@dataclass(frozen=True)
class RecordingTypeProfile:
    """Preferred settings for one kind of recording."""

    name: str
    preferred_quality: AudioQuality
    channels: int
    noise_reduction: bool
    auto_gain_control: bool = False
    echo_cancellation: bool = False

    @property
    def is_speech(self) -> bool:
        return self.channels == MONO

    @property
    def recommended_qualities(self) -> frozenset[AudioQuality]:
        """The preferred tier and its immediate neighbours."""
        rank = self.preferred_quality.rank
        return frozenset(q for q in AudioQuality if abs(q.rank - rank) <= 1)

    @classmethod
    def from_settings(cls, name: str, settings: ProfileSettings) -> RecordingTypeProfile:
        """Build a profile from a config.yaml entry."""
        if settings.channels not in (MONO, STEREO):
            msg = f"Profile '{name}' has unsupported channel count {settings.channels} (expected 1 or 2)"
            raise ValueError(msg)
        return cls(
            name=name,
            preferred_quality=AudioQuality.from_name(settings.quality),
            channels=settings.channels,
            noise_reduction=settings.noise_reduction,
            auto_gain_control=settings.auto_gain_control,
            echo_cancellation=settings.echo_cancellation,
        )


DEFAULT_PROFILE = RecordingTypeProfile("default", AudioQuality.HIGH, STEREO, noise_reduction=False)

# Matching order matters: "meeting" is checked before "speech"/"voice" so
# "voice meeting" picks up echo cancellation.
BUILTIN_PROFILES: Mapping[str, RecordingTypeProfile] = MappingProxyType(
    {
        "meeting": RecordingTypeProfile(
            "meeting",
            AudioQuality.MEDIUM,
            MONO,
            noise_reduction=True,
            auto_gain_control=True,
            echo_cancellation=True,
        ),
        "speech": RecordingTypeProfile(
            "speech", AudioQuality.MEDIUM, MONO, noise_reduction=True, auto_gain_control=True
        ),
        "voice": RecordingTypeProfile("voice", AudioQuality.MEDIUM, MONO, noise_reduction=True, auto_gain_control=True),
        "music": RecordingTypeProfile("music", AudioQuality.HIGH, STEREO, noise_reduction=False),
    }
)


def load_custom_profiles(settings: Mapping[str, ProfileSettings]) -> dict[str, RecordingTypeProfile]:
    """Convert config.yaml profile entries, skipping the invalid ones."""
    profiles = {}
    for name, entry in settings.items():
        try:
            profiles[name] = RecordingTypeProfile.from_settings(name, entry)
        except ValueError as e:
            LOG.warning("Skipping profile '%s': %s", name, e)
    return profiles


def resolve_profile(
    recording_type: str | None,
    custom_profiles: Mapping[str, RecordingTypeProfile] | None = None,
) -> RecordingTypeProfile:
    """
    Resolve a free-form recording-type label to a profile.

    Exact names win over substring matches and custom profiles win over
    built-in ones. Labels that match nothing get the default profile.
    """
    label = (recording_type or "").strip().lower()
    custom = dict(custom_profiles or {})
    candidates = {**custom, **{name: p for name, p in BUILTIN_PROFILES.items() if name not in custom}}

    if label in candidates:
        return candidates[label]

    for name, profile in candidates.items():
        if name and name in label:
            LOG.debug("Recording type '%s' matched profile '%s'", recording_type, name)
            return profile

    LOG.debug("Recording type '%s' matched no profile, using default", recording_type)
    return custom.get("default", DEFAULT_PROFILE)
