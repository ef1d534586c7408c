"""audio.estimate - predicted recording sizes per format and quality."""

from __future__ import annotations

import csv
import logging
from datetime import timedelta
from pathlib import Path
from typing import NamedTuple

from ..config.constants import BYTES_PER_MB, SECONDS_PER_MINUTE, SIZE_DECIMALS
from ..core.catalog import (
    GENERIC_PLATFORM,
    AudioFormat,
    AudioQuality,
    PlatformCapabilities,
    byte_cost_per_minute,
)

LOG = logging.getLogger(__name__)


class EstimationResult(NamedTuple):
    """Predicted size of one format/quality pair."""

    audio_format: AudioFormat
    quality: AudioQuality
    estimated_mb: float
    uncompressed_mb: float
    fits: bool | None

    @property
    def saving_percent(self) -> float:
        if self.uncompressed_mb == 0:
            return 0.0
        return 100 * (self.uncompressed_mb - self.estimated_mb) / self.uncompressed_mb


def _minutes(duration: timedelta) -> float:
    if duration < timedelta(0):
        msg = f"Duration must not be negative, got {duration}"
        raise ValueError(msg)
    return duration.total_seconds() / SECONDS_PER_MINUTE


def estimate_megabytes(audio_format: AudioFormat, quality: AudioQuality, duration: timedelta) -> float:
    """Unrounded size prediction in megabytes, used for every size-limit comparison."""
    return byte_cost_per_minute(audio_format, quality) * _minutes(duration) / BYTES_PER_MB


def estimate_file_size(audio_format: AudioFormat, quality: AudioQuality, duration: timedelta) -> float:
    """
    Predict the size of a recording in megabytes.

    Linear in duration; rounded to two decimals for display.
    """
    return round(estimate_megabytes(audio_format, quality, duration), SIZE_DECIMALS)


def compare_formats(
    duration: timedelta,
    *,
    quality: AudioQuality | None = None,
    platform: PlatformCapabilities = GENERIC_PLATFORM,
    max_file_size_mb: float | None = None,
) -> list[EstimationResult]:
    """Estimate every supported format (and every tier unless ``quality`` is given)."""
    qualities = [quality] if quality is not None else list(AudioQuality)

    results = []
    for audio_format in platform.supported_formats:
        for tier in qualities:
            estimated = estimate_file_size(audio_format, tier, duration)
            uncompressed = estimate_file_size(AudioFormat.WAV, tier, duration)
            fits = None
            if max_file_size_mb is not None:
                fits = estimate_megabytes(audio_format, tier, duration) <= max_file_size_mb
            results.append(EstimationResult(audio_format, tier, estimated, uncompressed, fits))

    LOG.debug("Compared %d format/quality pairs over %s", len(results), duration)
    return results


def recommend_result(results: list[EstimationResult]) -> EstimationResult | None:
    """Pick the highest-fidelity result that fits, or the smallest one when nothing fits."""
    if not results:
        return None

    fitting = [r for r in results if r.fits is not False]
    if fitting:
        # Highest tier first, then the largest (least compressed) file
        return max(fitting, key=lambda r: (r.quality.rank, r.estimated_mb))

    LOG.info("No format fits the size limit, recommending the smallest estimate")
    return min(results, key=lambda r: r.estimated_mb)


def print_comparison(
    results: list[EstimationResult],
    recommended: EstimationResult | None,
    *,
    duration: timedelta,
    max_file_size_mb: float | None = None,
) -> None:
    """Print a formatted comparison of all estimates."""
    minutes = _minutes(duration)
    print()
    print("=" * 60)
    print(f"{'RECORDING SIZE ESTIMATES':^60}")
    print("=" * 60)
    limit = f", limit {max_file_size_mb:.1f} MB" if max_file_size_mb is not None else ""
    print(f"Duration: {minutes:.1f} min{limit}")
    print("-" * 60)
    print(f"{'Format':<8} {'Quality':<9} {'Estimated':>12} {'of WAV':>8} {'Fits':>6}")
    print("-" * 60)

    for result in sorted(results, key=lambda r: (r.quality.rank, -r.estimated_mb)):
        star = " ★" if result == recommended else "  "
        fits = "-" if result.fits is None else ("yes" if result.fits else "no")
        print(
            f"{result.audio_format.value:<8} {result.quality.value:<9} {result.estimated_mb:>9.2f} MB "
            f"{100 - result.saving_percent:>7.1f}% {fits:>6}{star}"
        )

    print("-" * 60)
    if recommended is not None:
        print(f"\n★ RECOMMENDED: {recommended.audio_format.value} at {recommended.quality.value}")
        if recommended.fits is False:
            print("⚠️  Nothing fits the size limit; this is the smallest achievable recording")
    print()


def save_csv(results: list[EstimationResult], csv_path: str | Path) -> None:
    """Write estimates to a CSV file."""
    csv_path_obj = Path(csv_path)
    csv_path_obj.parent.mkdir(parents=True, exist_ok=True)
    with csv_path_obj.open("w", newline="") as fh:
        wr = csv.writer(fh)
        wr.writerow(["format", "quality", "estimated_mb", "uncompressed_mb", "saving_percent", "fits"])
        for r in results:
            wr.writerow(
                [
                    r.audio_format.value,
                    r.quality.value,
                    f"{r.estimated_mb:.2f}",
                    f"{r.uncompressed_mb:.2f}",
                    f"{r.saving_percent:.1f}",
                    "" if r.fits is None else r.fits,
                ]
            )
    LOG.info("Saved %d estimates to %s", len(results), csv_path_obj)
