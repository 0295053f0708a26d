"""Per-method registry of call nodes for one aggregation session."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from calltree.domain.model.call_node import CallNode
    from calltree.domain.model.method_info import MethodInfo


@dataclass(slots=True)
class MethodRegistry:
    """Mutable registry: method → every live CallNode targeting it.

    Scoped to one aggregation session, not global.
    Node sets keep insertion order (dict used as ordered set).

    NOT frozen because merges remove absorbed nodes.
    Lock guards registration from several collection threads;
    merges still need exclusive access to the trees they touch.
    """

    _nodes: dict[MethodInfo, dict[CallNode, None]] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def add(self, node: CallNode) -> None:
        """Register node under its target. Thread-safe."""
        with self._lock:
            self._nodes.setdefault(node.target, {})[node] = None

    def remove(self, node: CallNode) -> None:
        """Deregister node. No-op if absent. Thread-safe."""
        with self._lock:
            nodes = self._nodes.get(node.target)
            if nodes is None:
                return
            nodes.pop(node, None)
            if not nodes:
                del self._nodes[node.target]

    def register_tree(self, root: CallNode) -> int:
        """Register root and all its descendants.

        Returns:
            Number of nodes registered.
        """
        count = 0
        pending = [root]
        while pending:
            node = pending.pop()
            self.add(node)
            count += 1
            pending.extend(node.children)
        return count

    def nodes(self, method: MethodInfo) -> tuple[CallNode, ...]:
        """Snapshot of nodes targeting method, in registration order."""
        with self._lock:
            return tuple(self._nodes.get(method, ()))

    def all_nodes(self) -> tuple[CallNode, ...]:
        """Snapshot of every registered node."""
        with self._lock:
            return tuple(node for nodes in self._nodes.values() for node in nodes)

    def methods(self) -> tuple[MethodInfo, ...]:
        """Methods with at least one registered node."""
        with self._lock:
            return tuple(self._nodes)

    def called(self, method: MethodInfo) -> int:
        """Total invocation count of method across all nodes."""
        return sum(node.called for node in self.nodes(method))

    def total_time(self, method: MethodInfo, i: int = 0) -> float:
        """Total time of method, skipping recursive invocations.

        A node is recursive when its stack already contains the target
        above it; its time is included in the outer invocation.
        """
        return sum(
            node.total_time(i) for node in self.nodes(method) if not _is_recursive(node)
        )

    def self_time(self, method: MethodInfo, i: int = 0) -> float:
        return sum(node.self_time(i) for node in self.nodes(method))

    def wait_time(self, method: MethodInfo, i: int = 0) -> float:
        return sum(node.wait_time(i) for node in self.nodes(method))

    def __contains__(self, node: object) -> bool:
        target = getattr(node, "target", None)
        with self._lock:
            return node in self._nodes.get(target, ())  # type: ignore[arg-type]

    def __len__(self) -> int:
        with self._lock:
            return sum(len(nodes) for nodes in self._nodes.values())


def _is_recursive(node: CallNode) -> bool:
    return node.target in node.stack[:-1]
