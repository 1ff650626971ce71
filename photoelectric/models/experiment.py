"""
Photoelectric Experiment Model

This model coordinates a complete photoelectric experiment session and is
the single surface the presentation layer talks to.

The experiment model:
- Owns one ExperimentLedger (no shared global state)
- Evaluates the physics for caller-supplied parameters
- Runs the measurement sampler and records results in the ledger
- Provides snapshots, the I-V curve and CSV export
- Notifies an optional callback of each new measurement
"""

from pathlib import Path
from typing import Optional, Dict, Any, Callable, List, Sequence, Tuple, Union

import numpy as np

from ..config.settings import (
    DEFAULT_EXPERIMENT_PARAMS,
    LOGGING_CONFIG,
    MEASUREMENT_CONFIG,
)
from ..utils.data_export import PhotoelectricDataExporter
from .errors import (
    EmptyLedgerError,
    InvalidParameterError,
    MeasurementError,
    UnknownMaterialError,
)
from .ledger import ExperimentLedger, MeasurementRecord
from .materials import get_material
from .measurement import (
    MeasurementSampler,
    NumpyRandomSource,
    RandomSource,
    SamplerOutput,
)
from .physics import ExperimentParameters, PhysicsModel, PhysicsResult
from common.utils import DataExportError, get_logger, get_error

# Module-level logger for the photoelectric experiment
_logger = get_logger(LOGGING_CONFIG["logger_name"])


class PhotoelectricExperiment:
    """
    High-level model for a photoelectric experiment session.

    Every operation is synchronous. The instance is not thread-safe: a
    periodic redraw that polls evaluate()/snapshot() must not interleave
    with measure() without external synchronization.
    """

    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        ledger: Optional[ExperimentLedger] = None,
        physics_model: Optional[PhysicsModel] = None,
        exporter: Optional[PhotoelectricDataExporter] = None,
        config: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the experiment.

        Args:
            random_source: Uniform [0, 1) source for measurement noise
                (a fresh NumpyRandomSource by default)
            ledger: Ledger to record into (a new empty one by default)
            physics_model: Physics model (default constants by default)
            exporter: CSV exporter
            config: Optional measurement config override (MEASUREMENT_CONFIG)
        """
        self.config = config or MEASUREMENT_CONFIG.copy()
        self.physics_model = physics_model or PhysicsModel()
        self.sampler = MeasurementSampler(
            random_source or NumpyRandomSource(), self.config
        )
        self.ledger = ledger if ledger is not None else ExperimentLedger()
        self.exporter = exporter or PhotoelectricDataExporter()

        self._measurement_callback: Optional[Callable[[MeasurementRecord], None]] = None

    def set_measurement_callback(
        self,
        callback: Optional[Callable[[MeasurementRecord], None]]
    ) -> None:
        """
        Set callback for each new measurement (for table and chart updates).

        Args:
            callback: Function(record)
        """
        self._measurement_callback = callback

    @staticmethod
    def default_parameters() -> ExperimentParameters:
        """Parameters the experiment starts from (and returns to on a full reset)."""
        return ExperimentParameters.from_dict(DEFAULT_EXPERIMENT_PARAMS)

    def evaluate(self, parameters: ExperimentParameters) -> PhysicsResult:
        """
        Compute the physics for a set of parameters.

        Raises:
            InvalidParameterError: If the parameters fail validation
        """
        try:
            result = self.physics_model.evaluate(parameters)
        except InvalidParameterError as e:
            self._report_invalid(e)
            raise

        _logger.debug(
            f"{parameters.material_id} λ={parameters.wavelength_nm}nm: "
            f"f={result.frequency_thz:.1f}THz, E={result.photon_energy_ev:.3f}eV, "
            f"KE_max={result.max_kinetic_energy_ev:.3f}eV, "
            f"Vs={result.stopping_potential_v:.6f}V, I={result.current_ua:.6f}µA"
        )
        return result

    def measure(
        self,
        parameters: ExperimentParameters,
        physics: Optional[PhysicsResult] = None,
    ) -> MeasurementRecord:
        """
        Take a repeated measurement and record it in the ledger.

        Args:
            parameters: Parameters to measure at
            physics: Physics result to draw readings from (computed from
                the parameters when omitted)

        Returns:
            MeasurementRecord: The new ledger record

        Raises:
            InvalidParameterError: If the parameters fail validation
            MeasurementError: If the readings could not be simulated

        The ledger is unchanged when an error is raised. Once the record is
        in the ledger, a failing callback is logged and does not raise.
        """
        return self._commit(*self._take_readings(parameters, physics))

    def _take_readings(
        self,
        parameters: ExperimentParameters,
        physics: Optional[PhysicsResult] = None,
    ) -> Tuple[ExperimentParameters, PhysicsResult, SamplerOutput]:
        """Validate, evaluate and sample without touching the ledger."""
        try:
            parameters = self.physics_model.validate(parameters)
        except InvalidParameterError as e:
            self._report_invalid(e)
            raise

        if physics is None:
            physics = self.evaluate(parameters)

        try:
            output = self.sampler.sample(physics.current_ua)
        except MeasurementError as e:
            self._report("measurement_failed", e)
            raise

        return parameters, physics, output

    def _commit(
        self,
        parameters: ExperimentParameters,
        physics: PhysicsResult,
        output: SamplerOutput,
    ) -> MeasurementRecord:
        """Append one sampled measurement and notify listeners."""
        record = self.ledger.record_measurement(parameters, physics, output)

        _logger.student_stats(
            self.sampler.to_stats(output, voltage=parameters.applied_voltage_v)
        )

        if self._measurement_callback:
            try:
                self._measurement_callback(record)
            except Exception as e:
                _logger.error(f"Measurement callback failed: {e!r}")

        return record

    def snapshot(self, k: Optional[int] = None) -> List[MeasurementRecord]:
        """
        Read-only view of the recorded measurements.

        Args:
            k: Most recent k records; all records when None
        """
        if k is None:
            return list(self.ledger.records)
        return self.ledger.last_n(k)

    def recent_measurements(self) -> List[MeasurementRecord]:
        """Records shown in the recent-measurements table."""
        return self.ledger.last_n(self.config.get("table_rows", 10))

    def iv_curve(self) -> List[Tuple[float, float]]:
        """(voltage, mean current) points in the order they were measured."""
        return self.ledger.to_iv_curve_points()

    def reset(self) -> None:
        """Discard all measurements."""
        had_data = not self.ledger.is_empty()
        self.ledger.reset()
        if had_data:
            _logger.info("Experiment reset; I-V data cleared")

    def export(self) -> str:
        """
        Export all measurements as CSV text.

        Raises:
            EmptyLedgerError: If no measurement has been taken
        """
        try:
            text = self.exporter.export_csv(self.ledger)
        except EmptyLedgerError as e:
            self._report("empty_ledger", e)
            raise

        _logger.info(f"Exported {len(self.ledger)} measurement sets to CSV")
        return text

    def save(self, file_path: Optional[Union[str, Path]] = None) -> Path:
        """
        Export all measurements to a CSV file.

        Args:
            file_path: Destination (photoelectric_data_<epoch-ms>.csv by default)

        Raises:
            EmptyLedgerError: If no measurement has been taken
            DataExportError: If the file cannot be written
        """
        try:
            path = self.exporter.save_csv(self.ledger, file_path)
        except EmptyLedgerError as e:
            self._report("empty_ledger", e)
            raise
        except DataExportError as e:
            self._report("data_save_failed", e)
            raise

        _logger.info(f"Saved {len(self.ledger)} measurement sets to {path}")
        return path

    def generate_voltage_array(self, start: float, stop: float, step: float) -> np.ndarray:
        """
        Generate sweep voltages from start to stop, with stop inclusive.

        Args:
            start: Start voltage in Volts
            stop: Stop voltage in Volts
            step: Step size in Volts (sign is taken from the sweep direction)

        Returns:
            np.ndarray: Voltage points

        Raises:
            InvalidParameterError: If step is zero
        """
        if step == 0:
            raise InvalidParameterError("Sweep step must be non-zero.")

        step = abs(step) if stop >= start else -abs(step)
        n_steps = int(np.floor((stop - start) / step + 1e-9))
        voltages = start + step * np.arange(n_steps + 1)
        if not np.isclose(voltages[-1], stop):
            voltages = np.append(voltages, stop)

        decimals = self.config.get("voltage_decimals", 4)
        return np.round(voltages, decimals=decimals)

    def sweep(
        self,
        parameters: ExperimentParameters,
        voltages: Sequence[float],
    ) -> List[MeasurementRecord]:
        """
        Measure once at each voltage, in the order given.

        Every point is validated and sampled before the first record is
        appended, so an invalid point or a sampling error leaves the ledger
        untouched.

        Args:
            parameters: Base parameters (applied voltage is replaced per point)
            voltages: Voltages to measure at

        Returns:
            List[MeasurementRecord]: The new records, in sweep order

        Raises:
            InvalidParameterError: If any point fails validation
            MeasurementError: If the readings for any point could not be simulated
        """
        points = [parameters.with_voltage(float(v)) for v in voltages]
        for point in points:
            try:
                self.physics_model.validate(point)
            except InvalidParameterError as e:
                self._report_invalid(e)
                raise

        material = get_material(parameters.material_id)
        _logger.info(
            f"Sweeping {len(points)} points on {material.name} "
            f"(φ={material.work_function_ev:.2f} eV) at {parameters.wavelength_nm} nm"
        )
        readings = [self._take_readings(point) for point in points]
        return [self._commit(*reading) for reading in readings]

    @classmethod
    def _report_invalid(cls, exc: InvalidParameterError) -> None:
        if isinstance(exc, UnknownMaterialError):
            cls._report("unknown_material", exc)
        else:
            cls._report("invalid_parameter", exc)

    @staticmethod
    def _report(error_key: str, exc: Exception) -> None:
        """Log a student-facing error for an exception about to propagate."""
        error = get_error(error_key)
        if error:
            _logger.student_error(error.title, str(exc), error.causes, error.actions)
        else:
            _logger.error(str(exc))
