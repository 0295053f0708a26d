"""Domain model entities."""

from calltree.domain.model.call_node import CallNode
from calltree.domain.model.configuration import AggregationConfig
from calltree.domain.model.enums import MeasureMode, VisitEvent
from calltree.domain.model.measurement import Measurement, MeasurementVector
from calltree.domain.model.method_info import MethodInfo
from calltree.domain.model.method_registry import MethodRegistry

__all__ = [
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
