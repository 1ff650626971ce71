"""Exception types for the photoelectric engine."""

from common.utils.data_export import DataExportError


class PhotoelectricError(Exception):
    """Base exception for all photoelectric engine errors."""
    pass


class InvalidParameterError(PhotoelectricError, ValueError):
    """Experiment parameter outside its documented range, or unusable."""
    pass


class UnknownMaterialError(InvalidParameterError):
    """Material id not found in the catalog."""
    pass


class MeasurementError(PhotoelectricError):
    """Repeated-measurement simulation could not produce consistent data."""
    pass


class EmptyLedgerError(PhotoelectricError, DataExportError):
    """Export requested while the ledger holds no measurements."""
    pass


__all__ = [
    "PhotoelectricError",
    "InvalidParameterError",
    "UnknownMaterialError",
    "MeasurementError",
    "EmptyLedgerError",
]
