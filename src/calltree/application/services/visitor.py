"""Depth-first traversal of call trees with enter/exit events."""

from __future__ import annotations

from typing import TYPE_CHECKING

from calltree.domain.model.call_node import CallNode
from calltree.domain.model.enums import VisitEvent

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator


def walk(roots: CallNode | Iterable[CallNode]) -> Iterator[tuple[CallNode, VisitEvent]]:
    """Yield (node, ENTER) before and (node, EXIT) after each subtree.

    Children are visited in order. Iterative, so deep traces are safe.
    Mutating the tree while walking it is not supported.
    """
    if isinstance(roots, CallNode):
        roots = (roots,)

    for root in roots:
        pending: list[tuple[CallNode, VisitEvent]] = [(root, VisitEvent.ENTER)]
        while pending:
            node, event = pending.pop()
            yield node, event
            if event is VisitEvent.ENTER:
                pending.append((node, VisitEvent.EXIT))
                pending.extend((kid, VisitEvent.ENTER) for kid in reversed(node.children))


def visit(
    roots: CallNode | Iterable[CallNode],
    callback: Callable[[CallNode, VisitEvent], None],
) -> None:
    """Call callback(node, event) for every event of walk()."""
    for node, event in walk(roots):
        callback(node, event)


def iter_nodes(roots: CallNode | Iterable[CallNode]) -> Iterator[CallNode]:
    """Yield every node in pre-order."""
    for node, event in walk(roots):
        if event is VisitEvent.ENTER:
            yield node
