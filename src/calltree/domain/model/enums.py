"""Domain enumerations."""

from enum import Enum, auto


class MeasureMode(Enum):
    """Measurement dimension recorded by the profiling engine."""

    WALL_TIME = auto()
    PROCESS_TIME = auto()
    ALLOCATIONS = auto()
    MEMORY = auto()
    GC_RUNS = auto()
    GC_TIME = auto()


class VisitEvent(Enum):
    """Traversal event emitted by the tree visitor."""

    ENTER = auto()  # before children
    EXIT = auto()  # after children
