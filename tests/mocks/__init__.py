"""Mock random sources and clocks for testing."""

from .random_sources import (
    FixedRandomSource,
    SequenceRandomSource,
    BrokenRandomSource,
    MockClock,
)
