"""
Photoelectric Physics Model

Pure, stateless computation of the photoelectric effect for one set of
experiment parameters: photon energy, maximum kinetic energy of the
ejected electrons, threshold wavelength, stopping potential and the
collected photocurrent.

Design Notes:
- Energies are in eV, so the stopping potential in V equals the maximum
  kinetic energy in eV numerically
- The current model is intensity-linear with an exponential fall-off in the
  retarding region. It is a simplified proxy, not a quantum-efficiency model
- Validation happens before any computation; a result is never NaN or inf
"""

import math
from dataclasses import dataclass, asdict, replace
from typing import Optional, Dict, Any

from ..config.settings import (
    PHYSICAL_CONSTANTS,
    DEFAULT_EXPERIMENT_PARAMS,
    PARAMETER_RANGES,
    CURRENT_MODEL_CONFIG,
    ERROR_MESSAGES,
)
from .errors import InvalidParameterError
from .materials import Material, get_material


@dataclass(frozen=True)
class ExperimentParameters:
    """Illumination and bias settings for one evaluation."""
    material_id: str = DEFAULT_EXPERIMENT_PARAMS["material_id"]
    wavelength_nm: float = DEFAULT_EXPERIMENT_PARAMS["wavelength_nm"]
    intensity_w_per_m2: float = DEFAULT_EXPERIMENT_PARAMS["intensity_w_per_m2"]
    area_cm2: float = DEFAULT_EXPERIMENT_PARAMS["area_cm2"]
    applied_voltage_v: float = DEFAULT_EXPERIMENT_PARAMS["applied_voltage_v"]

    @classmethod
    def from_dict(cls, params: Dict[str, Any]) -> "ExperimentParameters":
        """Build parameters from a dict, defaulting missing keys."""
        merged = DEFAULT_EXPERIMENT_PARAMS.copy()
        merged.update({k: v for k, v in params.items() if k in merged})
        return cls(**merged)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def with_voltage(self, voltage: float) -> "ExperimentParameters":
        """Return a copy with a different applied voltage."""
        return replace(self, applied_voltage_v=voltage)

    def with_changes(self, **changes) -> "ExperimentParameters":
        return replace(self, **changes)


@dataclass(frozen=True)
class PhysicsResult:
    """Derived photoelectric quantities for one set of parameters."""
    frequency_hz: float
    photon_energy_ev: float
    work_function_ev: float
    max_kinetic_energy_ev: float
    threshold_wavelength_nm: float
    stopping_potential_v: float
    current_ua: float
    emission_occurs: bool

    @property
    def frequency_thz(self) -> float:
        return self.frequency_hz * 1e-12


def _as_finite_float(name: str, value: Any) -> float:
    """Convert a parameter value to a finite float or raise."""
    if isinstance(value, bool):
        raise InvalidParameterError(
            ERROR_MESSAGES["not_a_number"].format(name=name, value=value)
        )
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(
            ERROR_MESSAGES["not_a_number"].format(name=name, value=value)
        )
    if not math.isfinite(number):
        raise InvalidParameterError(
            ERROR_MESSAGES["not_a_number"].format(name=name, value=value)
        )
    return number


def validate_parameters(
    parameters: ExperimentParameters,
    ranges: Optional[Dict[str, tuple]] = None,
) -> ExperimentParameters:
    """
    Validate experiment parameters against the allowed ranges.

    Args:
        parameters: Parameters to check
        ranges: Optional range override (uses PARAMETER_RANGES by default)

    Returns:
        ExperimentParameters: Copy with all numeric fields as floats

    Raises:
        InvalidParameterError: If a value is non-numeric, non-finite, out of
            range, or the material is unknown
    """
    ranges = ranges or PARAMETER_RANGES

    # Unknown material is reported ahead of range errors
    get_material(parameters.material_id)

    values = {}
    for name, (low, high) in ranges.items():
        value = _as_finite_float(name, getattr(parameters, name))
        if not (low <= value <= high):
            raise InvalidParameterError(
                ERROR_MESSAGES["out_of_range"].format(
                    name=name, value=value, low=low, high=high
                )
            )
        values[name] = value

    return replace(parameters, **values)


class PhysicsModel:
    """
    Maps (material, experiment parameters) to a PhysicsResult.

    The model holds only constants; evaluate() and calculate() have no
    side effects.
    """

    def __init__(
        self,
        constants: Optional[Dict[str, float]] = None,
        current_config: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the physics model.

        Args:
            constants: Optional override of PHYSICAL_CONSTANTS
            current_config: Optional override of CURRENT_MODEL_CONFIG
        """
        self.constants = constants or PHYSICAL_CONSTANTS.copy()
        self.current_config = current_config or CURRENT_MODEL_CONFIG.copy()

    @property
    def planck_constant(self) -> float:
        return self.constants["planck_constant_ev_s"]

    @property
    def speed_of_light(self) -> float:
        return self.constants["speed_of_light_m_s"]

    @property
    def elementary_charge(self) -> float:
        return self.constants["elementary_charge_c"]

    def validate(self, parameters: ExperimentParameters) -> ExperimentParameters:
        return validate_parameters(parameters)

    def evaluate(self, parameters: ExperimentParameters) -> PhysicsResult:
        """
        Validate parameters, look up the material and compute the physics.

        Raises:
            InvalidParameterError: If the parameters fail validation
        """
        parameters = self.validate(parameters)
        material = get_material(parameters.material_id)
        return self.calculate(parameters, material.work_function_ev)

    def evaluate_material(
        self,
        parameters: ExperimentParameters,
        material: Material,
    ) -> PhysicsResult:
        """Compute the physics for an explicit material entry."""
        return self.calculate(validate_parameters(parameters), material.work_function_ev)

    def frequency(self, wavelength_nm: float) -> float:
        """Photon frequency in Hz: f = c / λ."""
        return self.speed_of_light / (wavelength_nm * 1e-9)

    def photon_energy(self, wavelength_nm: float) -> float:
        """Photon energy in eV: E = h f."""
        return self.planck_constant * self.frequency(wavelength_nm)

    def threshold_wavelength(self, work_function_ev: float) -> float:
        """
        Longest wavelength (nm) able to eject electrons: λ₀ = h c / φ.

        h is held in eV·s, so it is converted to J·s before dividing by the
        work function expressed in J (φ × e).

        Raises:
            InvalidParameterError: If the work function is not positive
        """
        work_function_ev = self._check_work_function(work_function_ev)
        planck_j_s = self.planck_constant * self.elementary_charge
        return (
            (planck_j_s * self.speed_of_light)
            / (work_function_ev * self.elementary_charge)
            * 1e9
        )

    def saturation_current(self, intensity_w_per_m2: float, area_cm2: float) -> float:
        """Saturation current in µA (intensity × area × calibration scale)."""
        return intensity_w_per_m2 * area_cm2 * self.current_config["saturation_scale_ua"]

    def photocurrent(
        self,
        applied_voltage_v: float,
        stopping_potential_v: float,
        saturation_current_ua: float,
        emission_occurs: bool,
    ) -> float:
        """
        Collected current in µA for a given bias.

        - No emission, or bias beyond the stopping potential: 0
        - Forward bias (V ≥ 0): saturation current
        - Retarding region (-Vs ≤ V < 0): I_sat × exp(V / Vs)
        """
        if not emission_occurs or applied_voltage_v < -stopping_potential_v:
            return 0.0

        if applied_voltage_v >= 0:
            return saturation_current_ua

        if stopping_potential_v == 0:
            # Zero-width retarding region: treat as saturation
            return saturation_current_ua

        return saturation_current_ua * math.exp(applied_voltage_v / stopping_potential_v)

    def calculate(
        self,
        parameters: ExperimentParameters,
        work_function_ev: float,
    ) -> PhysicsResult:
        """
        Compute the physics result for already-validated parameters.

        Args:
            parameters: Experiment parameters (ranges assumed valid)
            work_function_ev: Cathode work function in eV

        Returns:
            PhysicsResult: Derived quantities

        Raises:
            InvalidParameterError: If the work function is not positive
        """
        work_function_ev = self._check_work_function(work_function_ev)

        frequency_hz = self.frequency(parameters.wavelength_nm)
        photon_energy_ev = self.planck_constant * frequency_hz
        max_kinetic_energy_ev = max(0.0, photon_energy_ev - work_function_ev)
        threshold_wavelength_nm = self.threshold_wavelength(work_function_ev)

        # Vs (V) equals KE_max (eV): the elementary charge cancels
        stopping_potential_v = max_kinetic_energy_ev
        emission_occurs = photon_energy_ev > work_function_ev

        current_ua = self.photocurrent(
            parameters.applied_voltage_v,
            stopping_potential_v,
            self.saturation_current(parameters.intensity_w_per_m2, parameters.area_cm2),
            emission_occurs,
        )

        return PhysicsResult(
            frequency_hz=frequency_hz,
            photon_energy_ev=photon_energy_ev,
            work_function_ev=work_function_ev,
            max_kinetic_energy_ev=max_kinetic_energy_ev,
            threshold_wavelength_nm=threshold_wavelength_nm,
            stopping_potential_v=stopping_potential_v,
            current_ua=current_ua,
            emission_occurs=emission_occurs,
        )

    @staticmethod
    def _check_work_function(work_function_ev: Any) -> float:
        if isinstance(work_function_ev, bool):
            raise InvalidParameterError(
                ERROR_MESSAGES["invalid_work_function"].format(value=work_function_ev)
            )
        try:
            value = float(work_function_ev)
        except (TypeError, ValueError):
            raise InvalidParameterError(
                ERROR_MESSAGES["invalid_work_function"].format(value=work_function_ev)
            )
        if not math.isfinite(value) or value <= 0:
            raise InvalidParameterError(
                ERROR_MESSAGES["invalid_work_function"].format(value=work_function_ev)
            )
        return value
