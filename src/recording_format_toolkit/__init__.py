"""Recording Format Toolkit - codec and quality selection for meeting recordings."""

from __future__ import annotations

__version__ = "0.1.0"
__description__ = "Codec, quality and file size planning for audio recordings"

# Public API exports
from .config import FormatToolkitConfig, get_config
from .core import (
    AudioFormat,
    AudioQuality,
    ConfigManager,
    FormatToolkitError,
    RecordingConfiguration,
    RecordingTypeProfile,
    SizeConstraint,
    UnknownCombinationError,
    with_config_overrides,
)
from .processors import (
    CompatibilityRequest,
    ConfigurationRequest,
    EstimateRequest,
    FormatManager,
    FormatRequest,
    QualityRequest,
    RecommendationRequest,
    RecommendedQualitiesRequest,
)

__all__ = [
    # Configuration
    "FormatToolkitConfig",
    "get_config",
    "ConfigManager",
    "with_config_overrides",
    # Selection API
    "FormatManager",
    "FormatRequest",
    "QualityRequest",
    "ConfigurationRequest",
    "EstimateRequest",
    "RecommendedQualitiesRequest",
    "RecommendationRequest",
    "CompatibilityRequest",
    # Enums and data classes
    "AudioFormat",
    "AudioQuality",
    "RecordingConfiguration",
    "RecordingTypeProfile",
    "SizeConstraint",
    # Exceptions
    "FormatToolkitError",
    "UnknownCombinationError",
]
