"""Aggregation session: collect per-thread trees and consolidate them."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from calltree.application.services.merger import merge_call_tree
from calltree.application.services.roots import roots_of
from calltree.application.services.visitor import iter_nodes
from calltree.domain.exceptions import ConsistencyError, DimensionMismatchError, MergeError
from calltree.domain.model.configuration import AggregationConfig
from calltree.domain.model.method_registry import MethodRegistry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from calltree.domain.model.call_node import CallNode
    from calltree.domain.model.method_info import MethodInfo

logger = logging.getLogger(__name__)


class TreeAggregator:
    """Owns the registry and tracked roots of one aggregation session.

    Not thread-safe: add trees after collection has finished, then
    merge/consolidate from a single thread.
    """

    def __init__(
        self,
        config: AggregationConfig | None = None,
        registry: MethodRegistry | None = None,
    ) -> None:
        self._config = config if config is not None else AggregationConfig()
        self._registry = registry if registry is not None else MethodRegistry()
        self._roots: list[CallNode] = []

    @property
    def config(self) -> AggregationConfig:
        return self._config

    @property
    def registry(self) -> MethodRegistry:
        return self._registry

    @property
    def roots(self) -> tuple[CallNode, ...]:
        """Tracked tree roots, in the order they were added."""
        return tuple(self._roots)

    def add_tree(self, root: CallNode) -> None:
        """Validate and register a raw tree produced by the engine.

        Raises:
            ValueError: If root has a parent.
            DimensionMismatchError: If any node's dimensions differ from config.
        """
        # FAIL-FIRST validation
        if not root.is_root:
            raise ValueError(f"{root.target.full_name} is not a root")

        nodes = list(iter_nodes(root))
        for node in nodes:
            if node.measurements.dimensions != self._config.dimensions:
                raise DimensionMismatchError(
                    expected=self._config.dimensions,
                    got=node.measurements.dimensions,
                )

        for node in nodes:
            self._registry.add(node)
        self._roots.append(root)
        logger.debug("added tree %s with %d node(s)", root.target.full_name, len(nodes))

    def merge(self, node: CallNode, other: CallNode) -> None:
        """Merge other into node, detaching other from its parent first.

        Raises:
            MergeError: Before any change, if node descends from other.
        """
        if node.descendent_of(other):
            raise MergeError(f"{node.call_sequence} descends from the node merged into it")
        if other.parent is not None:
            other.detach()
        merge_call_tree(node, other, self._registry)
        self._roots = [root for root in self._roots if root is not other]

    def consolidate(self, nodes: Iterable[CallNode] | None = None) -> list[CallNode]:
        """Merge top-level nodes that share a target.

        Reduces nodes (default: tracked roots) to their roots, groups them
        by target in first-seen order and merges each group into its
        first member.

        Returns:
            One surviving node per target.
        """
        candidates = self._roots if nodes is None else nodes
        top = roots_of(candidates)

        groups: dict[MethodInfo, list[CallNode]] = {}
        for node in top:
            groups.setdefault(node.target, []).append(node)

        survivors: list[CallNode] = []
        for group in groups.values():
            primary, *rest = group
            for other in rest:
                self.merge(primary, other)
            survivors.append(primary)

        logger.info("consolidated %d top-level node(s) into %d", len(top), len(survivors))
        return survivors

    def check_invariants(self) -> None:
        """Verify tracked trees against the tree invariants.

        Checks one child per target, depth consistency, registry
        membership of every reachable node and reachability of every
        registered node.

        Raises:
            ConsistencyError: On the first violation found.
        """
        for root in self._roots:
            if root.depth != 0:
                raise ConsistencyError(root, reason=f"root depth is {root.depth}")

        reachable: set[CallNode] = set()
        for node in iter_nodes(self._roots):
            reachable.add(node)
            if node not in self._registry:
                raise ConsistencyError(node, reason="node not registered")
            seen: set[MethodInfo] = set()
            for kid in node.children:
                if kid.target in seen:
                    raise ConsistencyError(node, kid.target)
                seen.add(kid.target)
                if kid.parent is not node or kid.depth != node.depth + 1:
                    raise ConsistencyError(kid, reason="depth inconsistent with parent")

        for node in self._registry.all_nodes():
            if node not in reachable:
                raise ConsistencyError(node, reason="registered node not reachable")
