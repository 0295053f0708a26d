"""calltree - merge and query call trees from profiling runs."""

__version__ = "0.1.0"

from calltree.application.services import (
    TreeAggregator,
    iter_nodes,
    merge_call_tree,
    roots_of,
    visit,
    walk,
)
from calltree.domain import (
    AggregationConfig,
    CallNode,
    CallTreeError,
    ConsistencyError,
    DimensionMismatchError,
    MeasureMode,
    Measurement,
    MeasurementVector,
    MergeError,
    MethodInfo,
    MethodRegistry,
    VisitEvent,
)

__all__ = [
    "AggregationConfig",
    "CallNode",
    "CallTreeError",
    "ConsistencyError",
    "DimensionMismatchError",
    "MeasureMode",
    "Measurement",
    "MeasurementVector",
    "MergeError",
    "MethodInfo",
    "MethodRegistry",
    "TreeAggregator",
    "VisitEvent",
    "__version__",
    "iter_nodes",
    "merge_call_tree",
    "roots_of",
    "visit",
    "walk",
]
