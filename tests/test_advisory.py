"""Tests for compatibility checks and recommendations."""

import pytest

from recording_format_toolkit.audio.advisory import format_recommendation, is_format_compatible, recommended_qualities
from recording_format_toolkit.core.catalog import PLATFORMS, AudioFormat, AudioQuality


def test_common_pairs_are_compatible() -> None:
    assert is_format_compatible(AudioFormat.MP3, AudioQuality.MEDIUM)
    assert is_format_compatible(AudioFormat.M4A, AudioQuality.HIGH)
    assert is_format_compatible(AudioFormat.WAV, AudioQuality.ULTRA)


def test_low_quality_wav_is_not_offered() -> None:
    assert not is_format_compatible(AudioFormat.WAV, AudioQuality.LOW)


def test_platform_limits() -> None:
    """Test unsupported formats and 24-bit capture depend on the platform."""
    assert not is_format_compatible(AudioFormat.M4A, AudioQuality.MEDIUM, platform=PLATFORMS["desktop"])
    assert not is_format_compatible(AudioFormat.MP3, AudioQuality.MEDIUM, platform=PLATFORMS["ios"])
    assert not is_format_compatible(AudioFormat.WAV, AudioQuality.ULTRA, platform=PLATFORMS["android"])
    assert is_format_compatible(AudioFormat.WAV, AudioQuality.HIGH, platform=PLATFORMS["android"])


@pytest.mark.parametrize(
    ("audio_format", "quality", "expected"),
    [
        ("MP3", "medium", True),
        (" m4a ", "HIGH", True),
        ("flac", AudioQuality.HIGH, False),
        (AudioFormat.MP3, "lossless", False),
        (None, AudioQuality.HIGH, False),
        (AudioFormat.MP3, None, False),
        (None, None, False),
        (42, object(), False),
    ],
)
def test_compatibility_accepts_anything(audio_format: object, quality: object, expected: bool) -> None:
    """Test unrecognised input answers False instead of raising."""
    assert is_format_compatible(audio_format, quality) is expected


def test_compatibility_is_total() -> None:
    for platform in PLATFORMS.values():
        for audio_format in AudioFormat:
            for quality in AudioQuality:
                assert isinstance(is_format_compatible(audio_format, quality, platform=platform), bool)


def test_recommended_qualities_follow_profile() -> None:
    assert recommended_qualities("speech", AudioFormat.MP3) == {
        AudioQuality.LOW,
        AudioQuality.MEDIUM,
        AudioQuality.HIGH,
    }
    assert recommended_qualities("music", AudioFormat.M4A) == {
        AudioQuality.MEDIUM,
        AudioQuality.HIGH,
        AudioQuality.ULTRA,
    }


def test_recommended_qualities_drop_incompatible_tiers() -> None:
    assert recommended_qualities("speech", AudioFormat.WAV) == {AudioQuality.MEDIUM, AudioQuality.HIGH}
    assert recommended_qualities("music", AudioFormat.WAV, platform=PLATFORMS["android"]) == {
        AudioQuality.MEDIUM,
        AudioQuality.HIGH,
    }
    assert recommended_qualities("music", AudioFormat.M4A, platform=PLATFORMS["android"]) == frozenset()


def test_speech_recommendations() -> None:
    assert format_recommendation(AudioFormat.MP3, AudioQuality.MEDIUM, "speech").startswith(
        "Excellent choice for speech recordings"
    )
    assert format_recommendation(AudioFormat.M4A, AudioQuality.MEDIUM, "meeting").startswith(
        "Great choice for meeting"
    )
    assert format_recommendation(AudioFormat.AAC, AudioQuality.LOW, "voice").startswith("Compact choice for voice")


def test_music_recommendations() -> None:
    assert format_recommendation(AudioFormat.M4A, AudioQuality.HIGH, "music").startswith(
        "Excellent choice for music"
    )
    assert format_recommendation(AudioFormat.WAV, AudioQuality.ULTRA, "Live Music").startswith(
        "Professional quality for live music"
    )


def test_fallback_recommendation() -> None:
    assert (
        format_recommendation(AudioFormat.WAV, AudioQuality.MEDIUM, "music")
        == "WAV at medium is a good choice for music recordings"
    )
    assert (
        format_recommendation(AudioFormat.MP3, AudioQuality.HIGH, None)
        == "MP3 at high is a good choice for general recordings"
    )


@pytest.mark.parametrize("recording_type", ["meeting", "music", None])
def test_recommendation_names_format_and_tier(recording_type: str | None) -> None:
    """Test every recommendation, templated or fallback, states the chosen format and tier."""
    for audio_format in AudioFormat:
        for quality in AudioQuality:
            text = format_recommendation(audio_format, quality, recording_type)
            assert f"{audio_format.value.upper()} at {quality.value}" in text


@pytest.mark.parametrize("recording_type", ["meeting", "speech", "voice", "music", "podcast", "Board Meeting"])
def test_recommendation_names_the_recording_type(recording_type: str) -> None:
    """Test every recommendation mentions the recording type."""
    for audio_format in AudioFormat:
        for quality in AudioQuality:
            text = format_recommendation(audio_format, quality, recording_type)
            assert recording_type.lower() in text
