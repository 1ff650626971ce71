"""
Photocurrent Measurement Sampler

Simulates a repeated-measurement event: N readings scattered in a narrow
uniform band around the nominal current, reduced to mean, standard
deviation and standard error.

Design Notes:
- Randomness comes from an injected RandomSource, never a global generator,
  so a seeded or scripted source gives reproducible statistics
- Noise is uniform within ±noise_fraction of the nominal current, not Gaussian
- Variance is the population variance (divide by n)
"""

import math
from dataclasses import dataclass
from typing import Optional, Dict, Any, Tuple, Protocol

import numpy as np

from ..config.settings import MEASUREMENT_CONFIG
from .errors import MeasurementError
from common.utils import MeasurementStats


class RandomSource(Protocol):
    """Source of uniform random numbers in [0, 1)."""

    def next(self) -> float:
        ...


class NumpyRandomSource:
    """
    RandomSource backed by a numpy Generator.

    Args:
        seed: Optional seed; None draws fresh OS entropy
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def next(self) -> float:
        return float(self._rng.random())


@dataclass(frozen=True)
class SamplerOutput:
    """Summary of one repeated-measurement event."""
    mean: float
    std_dev: float
    std_error: float
    samples: Tuple[float, ...]

    @property
    def sample_count(self) -> int:
        return len(self.samples)


class MeasurementSampler:
    """
    Draws noisy readings around a nominal current and summarizes them.
    """

    def __init__(
        self,
        random_source: RandomSource,
        config: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the sampler.

        Args:
            random_source: Provider of uniform values in [0, 1)
            config: Optional configuration override (uses MEASUREMENT_CONFIG by default)
        """
        self.random_source = random_source
        self.config = config or MEASUREMENT_CONFIG.copy()

    @property
    def sample_count(self) -> int:
        return int(self.config.get("sample_count", 1000))

    @property
    def noise_fraction(self) -> float:
        return float(self.config.get("noise_fraction", 0.0001))

    def draw_uniform(self, count: int) -> np.ndarray:
        """
        Draw `count` values from the random source.

        Raises:
            MeasurementError: If the source yields a value outside [0, 1)
        """
        values = np.fromiter(
            (self.random_source.next() for _ in range(count)),
            dtype=float,
            count=count,
        )
        if np.any(~np.isfinite(values)) or np.any(values < 0.0) or np.any(values >= 1.0):
            raise MeasurementError("Random source returned a value outside [0, 1)")
        return values

    def sample(self, current_ua: float) -> SamplerOutput:
        """
        Take sample_count simulated readings of a nominal current.

        Args:
            current_ua: Nominal current in µA (from PhysicsResult)

        Returns:
            SamplerOutput: mean, std_dev, std_error and the raw readings

        Raises:
            MeasurementError: On a non-positive sample count, a non-finite
                current, or a misbehaving random source
        """
        n = self.sample_count
        if n <= 0:
            raise MeasurementError(f"Sample count must be positive, got {n}")
        if not math.isfinite(current_ua):
            raise MeasurementError(f"Nominal current must be finite, got {current_ua}")

        u = self.draw_uniform(n)
        samples = current_ua + (u - 0.5) * 2 * self.noise_fraction * current_ua

        mean, std_dev, std_error = self.calculate_statistics(samples)
        return SamplerOutput(
            mean=mean,
            std_dev=std_dev,
            std_error=std_error,
            samples=tuple(float(s) for s in samples),
        )

    @staticmethod
    def calculate_statistics(samples) -> Tuple[float, float, float]:
        """
        Mean, population standard deviation and standard error of readings.

        Args:
            samples: Sequence of readings (must be non-empty)

        Returns:
            Tuple[float, float, float]: (mean, std_dev, std_error)
        """
        values = np.asarray(samples, dtype=float)
        n = len(values)
        if n == 0:
            raise MeasurementError("Cannot summarize an empty set of readings")

        mean = values.sum() / n
        variance = np.sum((values - mean) ** 2) / n
        std_dev = math.sqrt(variance)
        std_error = std_dev / math.sqrt(n)
        return float(mean), float(std_dev), float(std_error)

    @staticmethod
    def to_stats(output: SamplerOutput, voltage: Optional[float] = None) -> MeasurementStats:
        """Wrap a sampler output for logging."""
        return MeasurementStats(
            mean=output.mean,
            std_dev=output.std_dev,
            std_error=output.std_error,
            n_measurements=output.sample_count,
            voltage=voltage,
        )
