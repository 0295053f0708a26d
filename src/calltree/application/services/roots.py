"""Root finder: reduce a flat set of call nodes to its top-level entries."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from calltree.domain.model.call_node import CallNode


def roots_of(nodes: Iterable[CallNode]) -> list[CallNode]:
    """Return the nodes that descend from no other node in the input.

    Input may span several trees and non-contiguous subtrees.

    Algorithm:
        1. Drop repeated references to the same node
        2. Sort deepest first (an ancestor is always strictly shallower)
        3. Pop the deepest; keep it unless it descends from a node
           still remaining

    O(n^2) descendant checks in the worst case; meant for the small
    frontier being consolidated, not for every node of a trace.

    Args:
        nodes: Call nodes in any order.

    Returns:
        Roots, deepest first.
    """
    unique = list(dict.fromkeys(nodes))
    remaining = deque(sorted(unique, key=lambda node: node.depth, reverse=True))

    roots: list[CallNode] = []
    while remaining:
        node = remaining.popleft()
        if not any(node.descendent_of(candidate) for candidate in remaining):
            roots.append(node)
    return roots
