"""Domain exceptions: all public errors of calltree.

All exceptions visible to users are defined in the domain layer.
Application services raise these, they do not define their own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from calltree.domain.model.call_node import CallNode
    from calltree.domain.model.method_info import MethodInfo


class CallTreeError(Exception):
    """Base for all calltree error exceptions.

    Allows: except CallTreeError to catch all library errors.
    """


class ConsistencyError(CallTreeError, RuntimeError):
    """Call tree violates a structural invariant.

    Raised when a node has more than one child for the same target,
    or when depth/registry bookkeeping disagrees with the tree.
    Fatal: the input trees are corrupt and must be fixed upstream.

    Attributes:
        node: Node where the violation was observed.
        target: Method involved in the violation (None if not target-specific).
        reason: What is inconsistent.
    """

    def __init__(
        self,
        node: CallNode,
        target: MethodInfo | None = None,
        reason: str = "inconsistent call tree",
    ) -> None:
        """Initialize with offending node, target and reason."""
        self.node = node
        self.target = target
        self.reason = reason
        where = node.target.full_name
        if target is not None:
            super().__init__(f"{reason}: {where} -> {target.full_name}")
        else:
            super().__init__(f"{reason}: {where}")


class DimensionMismatchError(CallTreeError, ValueError):
    """Measurement vectors have different dimension counts.

    Signals profiles collected with different measurement modes.
    Inherits ValueError for semantic correctness.

    Attributes:
        expected: Dimension count of the receiving vector.
        got: Dimension count of the other vector.
    """

    def __init__(self, expected: int, got: int) -> None:
        """Initialize with both dimension counts."""
        self.expected = expected
        self.got = got
        super().__init__(f"measurement dimensions differ: expected {expected}, got {got}")


class MergeError(CallTreeError, ValueError):
    """Merge request is invalid.

    Raised when merging a node into itself, into one of its own
    descendants, or nodes with different targets.

    Attributes:
        reason: Why the merge was rejected.
    """

    def __init__(self, reason: str) -> None:
        """Initialize with reason."""
        self.reason = reason
        super().__init__(f"cannot merge: {reason}")
