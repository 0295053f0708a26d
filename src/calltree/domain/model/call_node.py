"""Call tree node: one recorded invocation of a method."""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING

from calltree.domain.exceptions import ConsistencyError

if TYPE_CHECKING:
    from calltree.domain.model.measurement import MeasurementVector
    from calltree.domain.model.method_info import MethodInfo


class CallNode:
    """Node in a call tree.

    Owns its children. Parent is held through a weak reference and is
    used for traversal only, never for lifetime. Keep a reference to the
    root of every tree you work with.

    Invariants:
        - at most one child per target (checked by find_call)
        - child.depth == parent.depth + 1, root depth 0 (kept by add_child)

    Nodes compare and hash by identity.

    Attributes:
        target: Method this invocation targets
        measurements: One (total, self, wait) triple per dimension
        called: Invocation count (>= 0)
        children: Owned child nodes in first-observed order
        depth: Distance from root
    """

    __slots__ = (
        "__weakref__",
        "_call_sequence",
        "_parent_ref",
        "_stack",
        "called",
        "children",
        "depth",
        "measurements",
        "target",
    )

    def __init__(
        self,
        target: MethodInfo,
        measurements: MeasurementVector,
        called: int = 0,
        parent: CallNode | None = None,
    ) -> None:
        """Create node, attaching it to parent when given.

        Raises:
            TypeError: If target or measurements is None
            ValueError: If called < 0
        """
        # FAIL-FIRST validation
        if target is None:
            raise TypeError("target must not be None")
        if measurements is None:
            raise TypeError("measurements must not be None")
        if called < 0:
            raise ValueError(f"called must be >= 0, got {called}")

        self.target = target
        self.measurements = measurements
        self.called = called
        self.children: list[CallNode] = []
        self.depth = 0
        self._parent_ref: weakref.ref[CallNode] | None = None
        self._stack: tuple[MethodInfo, ...] | None = None
        self._call_sequence: str | None = None

        if parent is not None:
            parent.add_child(self)

    # -- structure ---------------------------------------------------------

    @property
    def parent(self) -> CallNode | None:
        """Enclosing invocation, None for a root.

        A node whose parent was collected becomes a proper root:
        depth 0 and caches re-derived for its subtree.
        """
        if self._parent_ref is None:
            return None
        parent = self._parent_ref()
        if parent is None:
            self._parent_ref = None
            self._rebase(0)
        return parent

    @property
    def is_root(self) -> bool:
        """Check if node has no parent."""
        return self.parent is None

    def add_child(self, child: CallNode) -> None:
        """Reparent child (and its subtree) onto this node.

        Depth of the moved subtree is re-derived and cached stacks are
        dropped. The caller removes child from its previous parent's
        children list.
        """
        child._parent_ref = weakref.ref(self)
        self.children.append(child)
        child._rebase(self.depth + 1)

    def detach(self) -> None:
        """Remove node from its parent, making it a root."""
        parent = self.parent
        if parent is not None:
            parent.children = [kid for kid in parent.children if kid is not self]
        self._parent_ref = None
        self._rebase(0)

    def invalidate(self) -> None:
        """Drop cached stack and call_sequence for node and descendants."""
        self._rebase(self.depth)

    def _rebase(self, depth: int) -> None:
        # Iterative: traces can be deeper than the recursion limit
        pending: list[tuple[CallNode, int]] = [(self, depth)]
        while pending:
            node, node_depth = pending.pop()
            node.depth = node_depth
            node._stack = None
            node._call_sequence = None
            pending.extend((kid, node_depth + 1) for kid in node.children)

    # -- measurements ------------------------------------------------------

    def total_time(self, i: int = 0) -> float:
        return self.measurements.total(i)

    def self_time(self, i: int = 0) -> float:
        return self.measurements.self_time(i)

    def wait_time(self, i: int = 0) -> float:
        return self.measurements.wait(i)

    def children_time(self, i: int = 0) -> float:
        """Sum of children's total time. Recomputed on each call."""
        return sum(kid.total_time(i) for kid in self.children)

    # -- navigation & identity ---------------------------------------------

    @property
    def stack(self) -> tuple[MethodInfo, ...]:
        """Targets from root to this node. Cached until reparenting."""
        if self._stack is None:
            methods: list[MethodInfo] = []
            node: CallNode | None = self
            while node is not None:
                methods.append(node.target)
                node = node.parent
            methods.reverse()
            self._stack = tuple(methods)
        return self._stack

    @property
    def call_sequence(self) -> str:
        """Stack as "a->b->c" of full names. Cached with stack."""
        if self._call_sequence is None:
            self._call_sequence = "->".join(method.full_name for method in self.stack)
        return self._call_sequence

    def descendent_of(self, other: CallNode) -> bool:
        """Check if other is an ancestor of this node.

        Climbs from parent; stops once depth drops to other's depth
        without a match. A node is not its own descendant.
        """
        p = self.parent
        while p is not None and p is not other and p.depth > other.depth:
            p = p.parent
        return p is other

    def find_call(self, other: CallNode) -> CallNode | None:
        """Find the child targeting the same method as other.

        Returns:
            Matching child or None.

        Raises:
            ConsistencyError: If more than one child has that target.
        """
        matching = [kid for kid in self.children if kid.target == other.target]
        if len(matching) > 1:
            raise ConsistencyError(self, other.target)
        return matching[0] if matching else None

    def __str__(self) -> str:
        return (
            f"{self.target.full_name} (c: {self.called}, tt: {self.total_time()}, "
            f"st: {self.self_time()}, ct: {self.children_time()})"
        )

    def __repr__(self) -> str:
        return (
            f"<CallNode {self.target.full_name} d: {self.depth}, c: {self.called}, "
            f"tt: {self.total_time()}, st: {self.self_time()}, ct: {self.children_time()}>"
        )
