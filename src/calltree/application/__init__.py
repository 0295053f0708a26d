"""Application layer for call tree aggregation.

Components:
- services.merger: fold one call tree into another
- services.roots: reduce a node set to its top-level entries
- services.visitor: enter/exit traversal
- services.aggregator: aggregation session facade (TreeAggregator)
"""

from calltree.application.services import (
    TreeAggregator,
    iter_nodes,
    merge_call_tree,
    roots_of,
    visit,
    walk,
)

__all__ = [
    "TreeAggregator",
    "iter_nodes",
    "merge_call_tree",
    "roots_of",
    "visit",
    "walk",
]
