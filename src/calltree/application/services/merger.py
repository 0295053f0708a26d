"""Merger service: fold one call tree into another.

Used to consolidate trees of the same logical call graph observed in
different threads or runs. Counters accumulate; children with the same
target are unified, the rest are moved over without copying.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from calltree.domain.exceptions import MergeError

if TYPE_CHECKING:
    from calltree.domain.model.call_node import CallNode
    from calltree.domain.model.method_registry import MethodRegistry

logger = logging.getLogger(__name__)


def merge_call_tree(node: CallNode, other: CallNode, registry: MethodRegistry) -> None:
    """Merge other (and its subtree) into node.

    Algorithm, for each (node, other) pair starting with the given one:
        1. node.called += other.called
        2. node.measurements accumulates other's total, self and wait
        3. For each child of other, in order: merge into node's child with
           the same target if there is one, else reparent it onto node
        4. Clear other.children
        5. Remove other from registry

    Matched child pairs go on an explicit work stack (pre-order, child
    order kept), so trace depth is not bounded by the recursion limit.

    Detaching other from its own parent is the caller's job. On failure
    node may be partially updated and must not be reused.

    Args:
        node: Surviving node.
        other: Node to absorb. Left empty and deregistered.
        registry: Session registry that other is removed from.

    Raises:
        MergeError: If other is node, targets differ or node descends from other.
        ConsistencyError: If a node has two children with the same target.
        DimensionMismatchError: If measurement dimensions differ.
    """
    # FAIL-FIRST validation
    if other is node:
        raise MergeError("node cannot be merged into itself")
    if other.target != node.target:
        raise MergeError(f"targets differ: {node.target.full_name} vs {other.target.full_name}")
    if node.descendent_of(other):
        raise MergeError(f"{node.call_sequence} descends from the node merged into it")

    merged = 0
    moved = 0
    pending: list[tuple[CallNode, CallNode]] = [(node, other)]

    while pending:
        into, absorbed = pending.pop()

        # Dimension check happens inside add() before any value changes
        into.measurements.add(absorbed.measurements)
        into.called += absorbed.called

        matches: list[tuple[CallNode, CallNode]] = []
        for kid in absorbed.children:
            match = into.find_call(kid)
            if match is not None:
                matches.append((match, kid))
            else:
                into.add_child(kid)
                moved += 1

        absorbed.children.clear()
        registry.remove(absorbed)
        merged += 1

        # Reversed so the first matching child is merged next
        pending.extend(reversed(matches))

    logger.debug(
        "merged %s: %d node(s) absorbed, %d subtree(s) moved",
        node.call_sequence,
        merged,
        moved,
    )
