"""calltree domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, threading, weakref, collections.abc
"""

from calltree.domain.exceptions import (
    CallTreeError,
    ConsistencyError,
    DimensionMismatchError,
    MergeError,
)
from calltree.domain.model import (
    AggregationConfig,
    CallNode,
    MeasureMode,
    Measurement,
    MeasurementVector,
    MethodInfo,
    MethodRegistry,
    VisitEvent,
)

__all__ = [
    # Exceptions
    "CallTreeError",
    "ConsistencyError",
    "DimensionMismatchError",
    "MergeError",
    # Enums
    "MeasureMode",
    "VisitEvent",
    # Value objects
    "MethodInfo",
    "Measurement",
    # Entities
    "MeasurementVector",
    "CallNode",
    "MethodRegistry",
    # Configuration
    "AggregationConfig",
]
