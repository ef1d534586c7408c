"""Size estimation, selection and advisory functions."""

from .advisory import format_recommendation, is_format_compatible, recommended_qualities
from .estimate import EstimationResult, compare_formats, estimate_file_size, estimate_megabytes
from .selection import (
    build_configuration,
    recordable_formats,
    recordable_qualities,
    select_format,
    select_quality,
)

__all__ = [
    "EstimationResult",
    "build_configuration",
    "compare_formats",
    "estimate_file_size",
    "estimate_megabytes",
    "format_recommendation",
    "is_format_compatible",
    "recommended_qualities",
    "recordable_formats",
    "recordable_qualities",
    "select_format",
    "select_quality",
]
