"""Format selection front end."""

from .format_manager import FormatManager
from .requests import (
    CompatibilityRequest,
    ConfigurationRequest,
    EstimateRequest,
    FormatRequest,
    QualityRequest,
    RecommendationRequest,
    RecommendedQualitiesRequest,
)

__all__ = [
    "CompatibilityRequest",
    "ConfigurationRequest",
    "EstimateRequest",
    "FormatManager",
    "FormatRequest",
    "QualityRequest",
    "RecommendationRequest",
    "RecommendedQualitiesRequest",
]
