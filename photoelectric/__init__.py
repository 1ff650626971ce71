"""
Photoelectric Effect Measurement Package

This package models the photoelectric effect: it computes emission physics
for a photocathode material under given illumination and bias, simulates
repeated photocurrent readings, and builds an exportable I-V dataset.

Architecture:
- models/: Physics, measurement sampling and the experiment ledger
- config/: Settings and parameters
- utils/: Data export and display helpers
"""

__version__ = "1.0.0"

from .models import (
    PhotoelectricExperiment,
    ExperimentParameters,
    PhysicsResult,
    MeasurementRecord,
    PhotoelectricError,
    InvalidParameterError,
    EmptyLedgerError,
)

__all__ = [
    "PhotoelectricExperiment",
    "ExperimentParameters",
    "PhysicsResult",
    "MeasurementRecord",
    "PhotoelectricError",
    "InvalidParameterError",
    "EmptyLedgerError",
]
