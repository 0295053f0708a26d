"""Tests for roots service."""

from calltree.application.services.roots import roots_of
from calltree.domain.model.call_node import CallNode
from tests.factories import make_chain, make_node


def _small_tree() -> tuple[CallNode, CallNode, CallNode, CallNode]:
    """r -> (c1 -> g1, c2)."""
    r = make_node("r")
    c1 = make_node("c1", parent=r)
    c2 = make_node("c2", parent=r)
    g1 = make_node("g1", parent=c1)
    return r, c1, c2, g1


class TestRootsOf:
    """Tests for roots_of."""

    def test_children_and_grandchild(self) -> None:
        r, c1, c2, g1 = _small_tree()
        assert set(roots_of({c1, c2, g1})) == {c1, c2}

    def test_with_root(self) -> None:
        r, c1, c2, g1 = _small_tree()
        assert roots_of({r, c1, c2, g1}) == [r]

    def test_empty(self) -> None:
        assert roots_of([]) == []

    def test_single(self) -> None:
        r, *_ = _small_tree()
        assert roots_of([r]) == [r]

    def test_order_independent(self) -> None:
        r, c1, c2, g1 = _small_tree()
        assert roots_of([r, g1, c2, c1]) == [r]
        assert roots_of([g1, c1, r, c2]) == [r]

    def test_non_contiguous(self) -> None:
        """Grandchild with root but not the child in between."""
        r, c1, c2, g1 = _small_tree()
        assert roots_of([g1, r]) == [r]

    def test_several_trees(self) -> None:
        first = make_chain("main", "a", "b")
        second = make_chain("main", "a", "b")
        result = roots_of([first[2], second[1], first[1], second[2]])
        assert set(result) == {first[1], second[1]}

    def test_duplicate_references(self) -> None:
        r, c1, *_ = _small_tree()
        assert roots_of([c1, c1, c1]) == [c1]

    def test_returns_deepest_first(self) -> None:
        chain = make_chain("main", "a", "b")
        other = make_node("other")
        assert roots_of([other, chain[2]]) == [chain[2], other]

    def test_accepts_generator(self) -> None:
        r, c1, c2, g1 = _small_tree()
        assert roots_of(node for node in (g1, c1)) == [c1]
