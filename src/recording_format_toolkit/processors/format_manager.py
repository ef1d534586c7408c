"""Public entry point for format, quality and configuration selection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..audio import advisory, estimate, selection
from ..core import ConfigManager, get_platform
from ..core.catalog import GENERIC_PLATFORM
from ..core.profiles import load_custom_profiles

if TYPE_CHECKING:
    from ..core.base import RecordingConfiguration
    from ..core.catalog import AudioFormat, AudioQuality, PlatformCapabilities
    from ..core.profiles import RecordingTypeProfile
    from .requests import (
        CompatibilityRequest,
        ConfigurationRequest,
        EstimateRequest,
        FormatRequest,
        QualityRequest,
        RecommendationRequest,
        RecommendedQualitiesRequest,
    )

LOG = logging.getLogger(__name__)


class FormatManager:
    """Selects recording formats, qualities and configurations for the active platform."""

    def __init__(self, config_manager: ConfigManager | None = None, platform: str | None = None) -> None:
        """
        Initialize the format manager.

        Args:
            config_manager: Configuration source; the global config is used when omitted
            platform: Platform name overriding ``selection.platform`` (raises ValueError if unknown)

        """
        self.config_manager = config_manager or ConfigManager()
        self._platform = get_platform(platform) if platform is not None else None
        self.logger = logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")

    @property
    def platform(self) -> PlatformCapabilities:
        """Platform capabilities, re-read from config so overrides apply."""
        if self._platform is not None:
            return self._platform
        name = self.config_manager.get_value("selection.platform", GENERIC_PLATFORM.name)
        try:
            return get_platform(str(name))
        except ValueError as e:
            self.logger.warning("%s; using '%s'", e, GENERIC_PLATFORM.name)
            return GENERIC_PLATFORM

    @property
    def custom_profiles(self) -> dict[str, RecordingTypeProfile]:
        return load_custom_profiles(self.config_manager.get_value("profiles", {}) or {})

    def _recording_type(self, recording_type: str | None) -> str:
        if recording_type:
            return recording_type
        return str(self.config_manager.get_value("selection.default_recording_type", "meeting"))

    def get_optimal_format(self, request: FormatRequest) -> AudioFormat:
        """Choose a format for the requested quality and priorities."""
        return selection.select_format(
            request.quality,
            request.prioritize_quality,
            request.prioritize_size,
            request.constraint,
            platform=self.platform,
        )

    def get_optimal_quality(self, request: QualityRequest) -> AudioQuality:
        """Choose a quality tier for a format and recording type."""
        return selection.select_quality(
            request.audio_format,
            self._recording_type(request.recording_type),
            request.constraint,
            platform=self.platform,
            custom_profiles=self.custom_profiles,
        )

    def get_optimal_configuration(self, request: ConfigurationRequest) -> RecordingConfiguration:
        """Compose the full recording configuration."""
        config = selection.build_configuration(
            self._recording_type(request.recording_type),
            request.prioritize_quality,
            request.prioritize_size,
            request.constraint,
            platform=self.platform,
            custom_profiles=self.custom_profiles,
        )
        self.logger.info("Selected %s", config.summary)
        return config

    def estimate_file_size(self, request: EstimateRequest) -> float:
        """Predicted size in megabytes."""
        return estimate.estimate_file_size(request.audio_format, request.quality, request.duration)

    def get_supported_formats(self) -> tuple[AudioFormat, ...]:
        return self.platform.supported_formats

    def get_recommended_qualities(self, request: RecommendedQualitiesRequest) -> frozenset[AudioQuality]:
        return advisory.recommended_qualities(
            self._recording_type(request.recording_type),
            request.audio_format,
            platform=self.platform,
            custom_profiles=self.custom_profiles,
        )

    def get_format_recommendation(self, request: RecommendationRequest) -> str:
        return advisory.format_recommendation(
            request.audio_format,
            request.quality,
            self._recording_type(request.recording_type),
            custom_profiles=self.custom_profiles,
        )

    def is_format_compatible(self, request: CompatibilityRequest) -> bool:
        return advisory.is_format_compatible(request.audio_format, request.quality, platform=self.platform)
