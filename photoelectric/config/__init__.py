"""
Photoelectric Configuration Package

Configuration constants and settings for the photoelectric experiment.
"""

from .settings import (
    PHYSICAL_CONSTANTS,
    DEFAULT_EXPERIMENT_PARAMS,
    PARAMETER_RANGES,
    CURRENT_MODEL_CONFIG,
    MEASUREMENT_CONFIG,
    DATA_EXPORT_CONFIG,
    LOGGING_CONFIG,
    ERROR_MESSAGES,
)

__all__ = [
    "PHYSICAL_CONSTANTS",
    "DEFAULT_EXPERIMENT_PARAMS",
    "PARAMETER_RANGES",
    "CURRENT_MODEL_CONFIG",
    "MEASUREMENT_CONFIG",
    "DATA_EXPORT_CONFIG",
    "LOGGING_CONFIG",
    "ERROR_MESSAGES",
]
