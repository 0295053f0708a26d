"""Application services."""

from calltree.application.services.aggregator import TreeAggregator
from calltree.application.services.merger import merge_call_tree
from calltree.application.services.roots import roots_of
from calltree.application.services.visitor import iter_nodes, visit, walk

__all__ = [
    "TreeAggregator",
    "iter_nodes",
    "merge_call_tree",
    "roots_of",
    "visit",
    "walk",
]
