"""Tests for recording size estimation."""

import csv
from datetime import timedelta
from pathlib import Path

import pytest

from recording_format_toolkit.audio.estimate import (
    EstimationResult,
    compare_formats,
    estimate_file_size,
    estimate_megabytes,
    print_comparison,
    recommend_result,
    save_csv,
)
from recording_format_toolkit.core.catalog import PLATFORMS, AudioFormat, AudioQuality

DURATIONS = [timedelta(minutes=m) for m in (1, 5, 30, 90)]

# Rounding to two decimals keeps linearity within one hundredth
ROUNDING_TOLERANCE = 0.011


def test_known_estimates() -> None:
    """Test a few sizes against hand-computed values."""
    assert estimate_file_size(AudioFormat.WAV, AudioQuality.HIGH, timedelta(minutes=1)) == 5.05
    assert estimate_file_size(AudioFormat.MP3, AudioQuality.MEDIUM, timedelta(minutes=5)) == 3.43
    assert estimate_file_size(AudioFormat.AAC, AudioQuality.MEDIUM, timedelta(minutes=10)) == 4.58
    assert estimate_file_size(AudioFormat.WAV, AudioQuality.LOW, timedelta(minutes=30)) == 13.73


def test_zero_duration_is_zero() -> None:
    for audio_format in AudioFormat:
        for quality in AudioQuality:
            assert estimate_file_size(audio_format, quality, timedelta(0)) == 0.0


def test_negative_duration_rejected() -> None:
    with pytest.raises(ValueError, match="must not be negative"):
        estimate_file_size(AudioFormat.MP3, AudioQuality.LOW, timedelta(seconds=-1))


def test_estimate_increases_with_quality() -> None:
    """Test higher tiers never produce smaller files."""
    for duration in DURATIONS:
        for audio_format in AudioFormat:
            sizes = [estimate_file_size(audio_format, q, duration) for q in AudioQuality]
            assert sizes == sorted(sizes)


def test_estimate_is_linear_in_duration() -> None:
    """Test doubling or tripling the duration scales the estimate."""
    base = timedelta(minutes=7)
    for audio_format in AudioFormat:
        for quality in AudioQuality:
            single = estimate_file_size(audio_format, quality, base)
            for factor in (2, 3):
                scaled = estimate_file_size(audio_format, quality, base * factor)
                assert scaled == pytest.approx(single * factor, abs=ROUNDING_TOLERANCE * factor)


def test_compressed_formats_are_smaller_than_wav() -> None:
    """Test lossy formats beat uncompressed PCM at the same tier."""
    five_minutes = timedelta(minutes=5)
    for quality in AudioQuality:
        wav = estimate_file_size(AudioFormat.WAV, quality, five_minutes)
        m4a = estimate_file_size(AudioFormat.M4A, quality, five_minutes)
        mp3 = estimate_file_size(AudioFormat.MP3, quality, five_minutes)
        aac = estimate_file_size(AudioFormat.AAC, quality, five_minutes)
        assert wav > m4a > mp3 > aac


def test_compare_formats_covers_platform_grid() -> None:
    results = compare_formats(timedelta(minutes=10))
    assert len(results) == len(AudioFormat) * len(AudioQuality)
    assert all(r.fits is None for r in results)

    android = compare_formats(timedelta(minutes=10), platform=PLATFORMS["android"])
    assert {r.audio_format for r in android} == {AudioFormat.MP3, AudioFormat.AAC, AudioFormat.WAV}


def test_compare_formats_single_quality_and_fit() -> None:
    results = compare_formats(timedelta(minutes=60), quality=AudioQuality.MEDIUM, max_file_size_mb=50)

    assert [r.audio_format for r in results] == list(AudioFormat)
    fits = {r.audio_format: r.fits for r in results}
    assert fits == {AudioFormat.WAV: False, AudioFormat.MP3: True, AudioFormat.M4A: False, AudioFormat.AAC: True}


def test_compare_formats_fit_uses_unrounded_size() -> None:
    """Test a size that rounds down to the limit still counts as too large."""
    duration = timedelta(minutes=5)
    raw = estimate_megabytes(AudioFormat.MP3, AudioQuality.MEDIUM, duration)
    assert round(raw, 2) == 3.43
    assert raw > 3.433

    result = compare_formats(
        duration, quality=AudioQuality.MEDIUM, platform=PLATFORMS["desktop"], max_file_size_mb=3.433
    )[0]
    assert result.audio_format is AudioFormat.MP3
    assert result.estimated_mb == 3.43
    assert result.fits is False


def test_saving_percent_relative_to_wav() -> None:
    results = compare_formats(timedelta(minutes=10), quality=AudioQuality.HIGH)
    by_format = {r.audio_format: r for r in results}

    assert by_format[AudioFormat.WAV].saving_percent == 0.0
    assert by_format[AudioFormat.AAC].saving_percent > by_format[AudioFormat.MP3].saving_percent > 0


def test_saving_percent_zero_duration() -> None:
    result = EstimationResult(AudioFormat.MP3, AudioQuality.LOW, 0.0, 0.0, None)
    assert result.saving_percent == 0.0


def test_recommend_result_prefers_highest_fitting_tier() -> None:
    """Test the recommendation is the best tier that fits, largest file first."""
    results = compare_formats(timedelta(minutes=30), max_file_size_mb=10)
    recommended = recommend_result(results)

    assert recommended is not None
    assert (recommended.audio_format, recommended.quality) == (AudioFormat.MP3, AudioQuality.LOW)


def test_recommend_result_without_limit() -> None:
    recommended = recommend_result(compare_formats(timedelta(minutes=30)))

    assert recommended is not None
    assert (recommended.audio_format, recommended.quality) == (AudioFormat.WAV, AudioQuality.ULTRA)


def test_recommend_result_smallest_when_nothing_fits() -> None:
    recommended = recommend_result(compare_formats(timedelta(minutes=30), max_file_size_mb=1))

    assert recommended is not None
    assert (recommended.audio_format, recommended.quality) == (AudioFormat.AAC, AudioQuality.LOW)
    assert recommended.fits is False


def test_recommend_result_empty() -> None:
    assert recommend_result([]) is None


def test_print_comparison(capsys: pytest.CaptureFixture[str]) -> None:
    """Test the comparison table marks the recommendation."""
    duration = timedelta(minutes=30)
    results = compare_formats(duration, max_file_size_mb=10)
    print_comparison(results, recommend_result(results), duration=duration, max_file_size_mb=10)

    out = capsys.readouterr().out
    assert "RECORDING SIZE ESTIMATES" in out
    assert "Duration: 30.0 min, limit 10.0 MB" in out
    assert "★ RECOMMENDED: mp3 at low" in out
    assert "Nothing fits" not in out


def test_print_comparison_warns_when_nothing_fits(capsys: pytest.CaptureFixture[str]) -> None:
    duration = timedelta(minutes=30)
    results = compare_formats(duration, max_file_size_mb=1)
    print_comparison(results, recommend_result(results), duration=duration, max_file_size_mb=1)

    out = capsys.readouterr().out
    assert "★ RECOMMENDED: aac at low" in out
    assert "Nothing fits the size limit" in out


def test_save_csv(tmp_path: Path) -> None:
    csv_path = tmp_path / "out" / "estimates.csv"
    results = compare_formats(timedelta(minutes=5), quality=AudioQuality.MEDIUM, max_file_size_mb=4)

    save_csv(results, csv_path)

    with csv_path.open(newline="") as fh:
        rows = list(csv.DictReader(fh))
    assert len(rows) == len(results)
    assert rows[0]["format"] == "wav"
    assert rows[0]["saving_percent"] == "0.0"
    assert rows[1]["estimated_mb"] == "3.43"
    assert rows[1]["fits"] == "True"
