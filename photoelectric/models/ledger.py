"""
Experiment Ledger

Append-only history of measurement records for one experiment session.
The ledger owns its records; callers read them through snapshot accessors
and can only clear them with reset().

Design Notes:
- len(records) always equals the measurement counter
- I-V points come back in insertion order, not sorted by voltage: a voltage
  swept back and forth must plot as a continuous line in the order taken
- Not thread-safe; one logical caller at a time
"""

import datetime
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from ..config.settings import MEASUREMENT_CONFIG
from .errors import MeasurementError
from .measurement import SamplerOutput
from .physics import ExperimentParameters, PhysicsResult


def _utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


@dataclass(frozen=True)
class MeasurementRecord:
    """One repeated-measurement event, immutable once recorded."""
    timestamp: datetime.datetime
    parameters: ExperimentParameters
    physics: PhysicsResult
    mean_current_ua: float
    std_dev_ua: float
    std_error_ua: float
    sample_count: int
    raw_samples: Tuple[float, ...]

    @property
    def voltage(self) -> float:
        return self.parameters.applied_voltage_v


class ExperimentLedger:
    """Ordered, append-only collection of MeasurementRecords."""

    def __init__(self, clock: Optional[Callable[[], datetime.datetime]] = None):
        """
        Initialize an empty ledger.

        Args:
            clock: Optional timestamp provider (UTC now by default)
        """
        self._clock = clock or _utc_now
        self._records: List[MeasurementRecord] = []
        self._measurement_count = 0

    def __len__(self) -> int:
        return len(self._records)

    @property
    def measurement_count(self) -> int:
        return self._measurement_count

    @property
    def records(self) -> Tuple[MeasurementRecord, ...]:
        """All records, oldest first."""
        return tuple(self._records)

    def is_empty(self) -> bool:
        return not self._records

    def record_measurement(
        self,
        parameters: ExperimentParameters,
        physics: PhysicsResult,
        sampler_output: SamplerOutput,
    ) -> MeasurementRecord:
        """
        Build a record from one measurement event and append it.

        Args:
            parameters: Parameters the measurement was taken at
            physics: Physics result the readings were drawn from
            sampler_output: Summary and readings from the sampler

        Returns:
            MeasurementRecord: The appended record

        Raises:
            MeasurementError: If the sampler output holds no readings
        """
        samples = tuple(sampler_output.samples)
        if not samples:
            raise MeasurementError("Cannot record a measurement without readings")

        record = MeasurementRecord(
            timestamp=self._clock(),
            parameters=parameters,
            physics=physics,
            mean_current_ua=sampler_output.mean,
            std_dev_ua=sampler_output.std_dev,
            std_error_ua=sampler_output.std_error,
            sample_count=len(samples),
            raw_samples=samples,
        )

        self._records.append(record)
        self._measurement_count += 1
        return record

    def reset(self) -> None:
        """Clear all records and the counter. Safe to call when empty."""
        self._records.clear()
        self._measurement_count = 0

    def last_n(self, k: Optional[int] = None) -> List[MeasurementRecord]:
        """
        Up to k most recent records, oldest first.

        Args:
            k: Number of records (table_rows from config by default)
        """
        if k is None:
            k = MEASUREMENT_CONFIG.get("table_rows", 10)
        if k <= 0:
            return []
        return self._records[-k:]

    def to_iv_curve_points(self) -> List[Tuple[float, float]]:
        """(voltage, mean current) pairs in insertion order."""
        return [(r.voltage, r.mean_current_ua) for r in self._records]
