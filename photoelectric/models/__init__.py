"""
Photoelectric Models Package

Models hold the experiment logic: the material catalog, the physics of
emission, the simulated repeated measurement and the ledger of results.
They never touch presentation code.
"""

from .errors import (
    PhotoelectricError,
    InvalidParameterError,
    UnknownMaterialError,
    MeasurementError,
    EmptyLedgerError,
)
from .materials import Material, MATERIALS, get_material, list_materials
from .physics import (
    ExperimentParameters,
    PhysicsResult,
    PhysicsModel,
    validate_parameters,
)
from .measurement import (
    RandomSource,
    NumpyRandomSource,
    SamplerOutput,
    MeasurementSampler,
)
from .ledger import MeasurementRecord, ExperimentLedger
from .experiment import PhotoelectricExperiment

__all__ = [
    "PhotoelectricError",
    "InvalidParameterError",
    "UnknownMaterialError",
    "MeasurementError",
    "EmptyLedgerError",
    "Material",
    "MATERIALS",
    "get_material",
    "list_materials",
    "ExperimentParameters",
    "PhysicsResult",
    "PhysicsModel",
    "validate_parameters",
    "RandomSource",
    "NumpyRandomSource",
    "SamplerOutput",
    "MeasurementSampler",
    "MeasurementRecord",
    "ExperimentLedger",
    "PhotoelectricExperiment",
]
