"""Aggregation configuration supplied by the caller."""

from __future__ import annotations

from dataclasses import dataclass

from calltree.domain.model.enums import MeasureMode


@dataclass(frozen=True, slots=True)
class AggregationConfig:
    """Configuration DTO for one aggregation session.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        measures: Measurement modes in dimension order. Every tree added to
            the session must carry exactly this many dimensions.
    """

    measures: tuple[MeasureMode, ...] = (MeasureMode.WALL_TIME,)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.measures:
            raise ValueError("measures must not be empty")
        for mode in self.measures:
            if not isinstance(mode, MeasureMode):
                raise TypeError(f"measures must contain MeasureMode, got {type(mode).__name__}")
        if len(set(self.measures)) != len(self.measures):
            raise ValueError(f"measures contains duplicates: {self.measures}")

    @property
    def dimensions(self) -> int:
        """Number of measurement dimensions."""
        return len(self.measures)

    def index_of(self, mode: MeasureMode) -> int:
        """Dimension index of mode.

        Raises:
            KeyError: If mode is not configured.
        """
        try:
            return self.measures.index(mode)
        except ValueError:
            raise KeyError(f"measure {mode.name} not configured") from None
