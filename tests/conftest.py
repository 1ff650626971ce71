"""
Pytest configuration and shared fixtures for the photoelectric test suite.

This file provides:
- Standard experiment parameters (Cesium at 400 nm, as in the lab defaults)
- Deterministic random sources and a fixed clock
- Ready-made ledgers and experiment models
"""

import pytest

from photoelectric.models import (
    ExperimentLedger,
    ExperimentParameters,
    MeasurementSampler,
    NumpyRandomSource,
    PhotoelectricExperiment,
    PhysicsModel,
)
from photoelectric.config.settings import MEASUREMENT_CONFIG
from tests.mocks import FixedRandomSource, MockClock


@pytest.fixture
def cesium_params():
    """Cesium cathode, 400 nm, 5 W/m², 0.10 cm², 0 V."""
    return ExperimentParameters(
        material_id="Cs",
        wavelength_nm=400.0,
        intensity_w_per_m2=5.0,
        area_cm2=0.10,
        applied_voltage_v=0.0,
    )


@pytest.fixture
def gold_params():
    """Gold cathode at 400 nm: photon energy below the work function."""
    return ExperimentParameters(
        material_id="Au",
        wavelength_nm=400.0,
        intensity_w_per_m2=5.0,
        area_cm2=0.10,
        applied_voltage_v=0.0,
    )


@pytest.fixture
def physics_model():
    return PhysicsModel()


@pytest.fixture
def mock_clock():
    return MockClock()


@pytest.fixture
def small_config():
    """Measurement config with 3 readings per event (readable CSV rows)."""
    config = MEASUREMENT_CONFIG.copy()
    config["sample_count"] = 3
    return config


@pytest.fixture
def ledger(mock_clock):
    return ExperimentLedger(clock=mock_clock)


@pytest.fixture
def seeded_experiment(mock_clock):
    """Experiment with seeded noise and a fixed clock."""
    return PhotoelectricExperiment(
        random_source=NumpyRandomSource(seed=2150),
        ledger=ExperimentLedger(clock=mock_clock),
    )


@pytest.fixture
def noiseless_experiment(mock_clock, small_config):
    """Experiment whose readings all equal the nominal current."""
    return PhotoelectricExperiment(
        random_source=FixedRandomSource(0.5),
        ledger=ExperimentLedger(clock=mock_clock),
        config=small_config,
    )


@pytest.fixture
def noiseless_sampler():
    return MeasurementSampler(FixedRandomSource(0.5))
