"""Per-dimension measurements attached to call nodes."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from calltree.domain.exceptions import DimensionMismatchError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(frozen=True, slots=True)
class Measurement:
    """One (total, self, wait) triple for a single dimension.

    Immutable value object with FAIL-FIRST validation. Values must be
    >= 0; engines whose arithmetic leaves tiny negative residues (e.g.
    self = total - children computed in floating point) should build
    through from_engine, which clamps them.

    Attributes:
        total_time: Value including callees
        self_time: Value spent in the method body itself
        wait_time: Value spent waiting (blocked, sleeping)
    """

    total_time: float = 0.0
    self_time: float = 0.0
    wait_time: float = 0.0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.total_time < 0:
            raise ValueError(f"total_time must be >= 0, got {self.total_time}")
        if self.self_time < 0:
            raise ValueError(f"self_time must be >= 0, got {self.self_time}")
        if self.wait_time < 0:
            raise ValueError(f"wait_time must be >= 0, got {self.wait_time}")

    @classmethod
    def from_engine(
        cls,
        total_time: float = 0.0,
        self_time: float = 0.0,
        wait_time: float = 0.0,
        tolerance: float = 1e-9,
    ) -> Measurement:
        """Create measurement from raw engine values.

        Values in [-tolerance, 0) are rounding noise and become 0.0.

        Raises:
            ValueError: If a value is below -tolerance.
        """
        return cls(
            _clamp(total_time, tolerance),
            _clamp(self_time, tolerance),
            _clamp(wait_time, tolerance),
        )


def _clamp(value: float, tolerance: float) -> float:
    return 0.0 if -tolerance <= value < 0 else value


@dataclass(slots=True)
class MeasurementVector:
    """Fixed-size ordered sequence of Measurements, one per dimension.

    NOT frozen: merges accumulate into it in place.
    Dimension count is fixed at construction.
    Every accessor defaults to dimension 0.
    """

    _values: list[Measurement]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self._values:
            raise ValueError("MeasurementVector requires at least one dimension")
        for value in self._values:
            if not isinstance(value, Measurement):
                raise TypeError(f"expected Measurement, got {type(value).__name__}")

    @classmethod
    def zeros(cls, dimensions: int = 1) -> MeasurementVector:
        """Create vector of empty measurements.

        Args:
            dimensions: Number of dimensions (must be >= 1)

        Returns:
            Vector with every value 0.
        """
        if dimensions < 1:
            raise ValueError(f"dimensions must be >= 1, got {dimensions}")
        return cls([Measurement() for _ in range(dimensions)])

    @classmethod
    def of(cls, *triples: tuple[float, float, float]) -> MeasurementVector:
        """Create vector from (total, self, wait) tuples, one per dimension."""
        return cls([Measurement(total, own, wait) for total, own, wait in triples])

    @classmethod
    def from_measurements(cls, values: Iterable[Measurement]) -> MeasurementVector:
        """Create vector from existing Measurements."""
        return cls(list(values))

    @property
    def dimensions(self) -> int:
        """Number of measurement dimensions."""
        return len(self._values)

    def total(self, i: int = 0) -> float:
        """Total value of dimension i."""
        return self._values[i].total_time

    def self_time(self, i: int = 0) -> float:
        """Self value of dimension i."""
        return self._values[i].self_time

    def wait(self, i: int = 0) -> float:
        """Wait value of dimension i."""
        return self._values[i].wait_time

    def add_total(self, other: MeasurementVector) -> None:
        """Add other's totals pairwise. Raises DimensionMismatchError."""
        self._check_dimensions(other)
        self._values = [
            replace(mine, total_time=mine.total_time + theirs.total_time)
            for mine, theirs in zip(self._values, other._values, strict=True)
        ]

    def add_self(self, other: MeasurementVector) -> None:
        """Add other's self values pairwise. Raises DimensionMismatchError."""
        self._check_dimensions(other)
        self._values = [
            replace(mine, self_time=mine.self_time + theirs.self_time)
            for mine, theirs in zip(self._values, other._values, strict=True)
        ]

    def add_wait(self, other: MeasurementVector) -> None:
        """Add other's wait values pairwise. Raises DimensionMismatchError."""
        self._check_dimensions(other)
        self._values = [
            replace(mine, wait_time=mine.wait_time + theirs.wait_time)
            for mine, theirs in zip(self._values, other._values, strict=True)
        ]

    def add(self, other: MeasurementVector) -> None:
        """Add total, self and wait of other. Nothing changes on mismatch."""
        self._check_dimensions(other)
        self.add_self(other)
        self.add_wait(other)
        self.add_total(other)

    def _check_dimensions(self, other: MeasurementVector) -> None:
        if self.dimensions != other.dimensions:
            raise DimensionMismatchError(expected=self.dimensions, got=other.dimensions)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Measurement]:
        return iter(self._values)

    def __getitem__(self, i: int) -> Measurement:
        return self._values[i]
