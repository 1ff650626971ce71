"""
Shared utilities for the photoelectric measurement engine.
"""

from .data_export import (
    DataExporter,
    DataExportError,
    format_fixed,
    format_iso_timestamp,
    join_quoted,
)
from .tiered_logger import TieredLogger, MeasurementStats, get_logger
from .error_messages import (
    ErrorTemplate,
    PHOTOELECTRIC_ERRORS,
    get_error,
    format_error_message,
)

__all__ = [
    'DataExporter',
    'DataExportError',
    'format_fixed',
    'format_iso_timestamp',
    'join_quoted',
    'TieredLogger',
    'MeasurementStats',
    'get_logger',
    'ErrorTemplate',
    'PHOTOELECTRIC_ERRORS',
    'get_error',
    'format_error_message',
]
